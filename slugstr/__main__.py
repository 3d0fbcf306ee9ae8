from slugstr.cli import main

main()
