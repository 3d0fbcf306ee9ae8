import pytest

from slugstr import characters, utf8


@pytest.fixture(autouse=True)
def isolated_registry(monkeypatch):
    """Undo approximation registrations and backend changes after each test."""
    monkeypatch.setattr(characters, "_tables", dict(characters._tables))
    monkeypatch.setattr(utf8, "_default_backend", utf8._default_backend)
