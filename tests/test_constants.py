"""Tests for shared constants."""

from tagsafe.constants import ATTRIBUTE_IGNORE_STRING, DEFAULTS, VOID_ELEMENTS, is_void_element


class TestVoidElements:
    def test_known_void_elements(self):
        for name in ("br", "img", "input", "meta", "wbr"):
            assert name in VOID_ELEMENTS

    def test_containers_are_not_void(self):
        assert "div" not in VOID_ELEMENTS
        assert is_void_element("p") is False

    def test_case_insensitive(self):
        assert is_void_element("BR") is True

    def test_immutable(self):
        assert isinstance(VOID_ELEMENTS, frozenset)


class TestMarkers:
    def test_markers_differ(self):
        assert ATTRIBUTE_IGNORE_STRING != DEFAULTS["ignore_with"]

    def test_markers_have_no_structural_characters(self):
        for marker in (ATTRIBUTE_IGNORE_STRING, DEFAULTS["ignore_with"]):
            assert not any(c in marker for c in "<>\"' \n\r\t")
