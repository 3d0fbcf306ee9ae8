"""Tests for slugstr.slug_string module."""

import pytest

from slugstr.slug_string import SlugString
from slugstr.utf8 import CachingBackend, UnicodedataBackend, set_backend


class TestConstruction:
    def test_repairs_bytes(self):
        assert SlugString(b"caf\xe9") == "café"

    def test_valid_utf8_bytes(self):
        assert SlugString("Łódź".encode("utf-8")) == "Łódź"

    def test_composes(self):
        slug = SlugString("über")
        assert slug == "über"
        assert len(slug) == 4

    def test_non_string_input(self):
        assert SlugString(42) == "42"

    def test_none_is_empty(self):
        assert SlugString(None) == ""
        assert SlugString(None).normalize() == ""

    def test_from_slug_string_is_independent(self):
        original = SlugString("Hello World")
        copy = SlugString(original)
        copy.downcase_inplace()
        assert original == "Hello World"
        assert copy == "hello world"

    def test_to_slug_returns_self(self):
        slug = SlugString("x")
        assert slug.to_slug() is slug


class TestMutatingForms:
    def test_returns_str_and_updates_value(self):
        slug = SlugString("hello world")
        result = slug.with_dashes_inplace()
        assert result == "hello-world"
        assert type(result) is str
        assert slug == "hello-world"

    def test_normalize_inplace(self):
        slug = SlugString("Łódź, Poland")
        assert slug.normalize_inplace(ascii=True) == "lodz-poland"
        assert slug.wrapped_string == "lodz-poland"

    def test_approximate_then_to_ascii(self):
        slug = SlugString("¡Feliz año!")
        assert slug.approximate_ascii_inplace("spanish") == "¡Feliz anio!"
        assert slug.to_ascii_inplace() == "Feliz anio!"

    def test_truncate_by_codepoints(self):
        slug = SlugString("üéøá")
        assert slug.truncate_inplace(3) == "üéø"

    def test_truncate_by_bytes(self):
        slug = SlugString("üéøá")
        assert slug.truncate_bytes_inplace(3) == "ü"

    def test_case(self):
        slug = SlugString("Ärger")
        assert slug.upcase_inplace() == "ÄRGER"
        assert slug.downcase_inplace() == "ärger"

    def test_invalid_bound_leaves_value(self):
        slug = SlugString("abc")
        with pytest.raises(ValueError):
            slug.truncate_inplace(-1)
        assert slug == "abc"


class TestCopyingForms:
    SOURCE = "  Jürgen MÜLLER, ¡año! 日本  "

    @pytest.mark.parametrize("method, args", [
        ("approximate_ascii", ("german",)),
        ("clean", ()),
        ("word_chars", ()),
        ("normalize", ()),
        ("to_ascii", ()),
        ("truncate", (3,)),
        ("truncate_bytes", (3,)),
        ("with_dashes", ()),
        ("upcase", ()),
        ("downcase", ()),
        ("normalize_utf8", ()),
        ("tidy_bytes", ()),
    ])
    def test_receiver_unchanged(self, method, args):
        slug = SlugString(self.SOURCE)
        result = getattr(slug, method)(*args)
        assert isinstance(result, SlugString)
        assert result is not slug
        assert slug == self.SOURCE
        expected = SlugString(self.SOURCE)
        getattr(expected, f"{method}_inplace")(*args)
        assert result == expected

    def test_chaining(self):
        slug = SlugString("Jürgen Müller")
        result = slug.approximate_ascii("german").to_ascii().normalize()
        assert result == "juergen-mueller"
        assert slug == "Jürgen Müller"

    def test_normalize_keywords(self):
        assert SlugString("¡Feliz año!").normalize(True, locale="spanish") == "feliz-anio"
        assert SlugString("ab cd").normalize(max_bytes=3) == "ab-"


class TestBackend:
    def test_instance_backend_carried_to_copies(self):
        backend = CachingBackend()
        slug = SlugString("ÜBER Ärger", backend=backend)
        assert slug.downcase().backend is backend
        assert slug.normalize().upcase().backend is backend

    @pytest.mark.parametrize("backend", [UnicodedataBackend(), CachingBackend()])
    def test_backends_agree(self, backend):
        slug = SlugString("ÜBER Ärger u\u0308ber", backend=backend)
        assert slug.normalize() == "über-ärger-über"
        assert slug.upcase() == "ÜBER ÄRGER ÜBER"

    def test_global_default(self):
        backend = CachingBackend()
        set_backend(backend)
        slug = SlugString("ÜBER")
        assert slug.backend is backend
        assert slug.downcase() == "über"


class TestStringBehaviour:
    def test_str_and_bytes(self):
        slug = SlugString("naïve")
        assert str(slug) == "naïve"
        assert bytes(slug) == "naïve".encode("utf-8")

    def test_repr(self):
        assert repr(SlugString("a b")) == "SlugString('a b')"

    def test_equality(self):
        assert SlugString("abc") == SlugString("abc")
        assert SlugString("abc") == "abc"
        assert SlugString("abc") != "abd"
        assert SlugString("1") != 1

    def test_len_counts_codepoints(self):
        assert len(SlugString("üéøá")) == 4

    def test_contains(self):
        assert "ll" in SlugString("hello")

    def test_concatenation(self):
        result = SlugString("foo") + "-bar"
        assert isinstance(result, SlugString)
        assert result == "foo-bar"
        assert ("bar-" + SlugString("foo")) == "bar-foo"
        assert (SlugString("a") + SlugString("b")) == "ab"

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(SlugString("x"))
