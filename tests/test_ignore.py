"""Tests for ignored-element encoding."""

import pytest

from tagsafe.config import validate_config
from tagsafe.ignore import decode_ignored_elements, encode_ignored_elements
from tagsafe.tags import find_element_spans


def make_config(*ignore: str, ignore_with: str = "X"):
    return validate_config({"ignore": list(ignore), "ignore_with": ignore_with})


class TestEncodeIgnoredElements:
    def test_script_body_is_opaque(self):
        config = make_config("script")
        html = '<div>\n<script>var a = "<b>";</script>\n</div>'
        encoded = encode_ignored_elements(html, config)

        body = encoded[encoded.index("<script>") + len("<script>"):encoded.index("</script>")]
        assert body == 'var-Xws-a-Xws-=-Xws-"-Xlt-b-Xgt-";'
        assert not any(c in body for c in "<> \n\r\t")

    def test_outside_content_untouched(self):
        config = make_config("pre")
        html = "<p>a b</p>\n<pre>x y</pre>\n<p>c d</p>"
        encoded = encode_ignored_elements(html, config)

        assert encoded == "<p>a b</p>\n<pre>x-Xws-y</pre>\n<p>c d</p>"

    def test_all_character_classes(self):
        config = make_config("pre")
        encoded = encode_ignored_elements("<pre><\r\n\t >\u00a0</pre>", config)

        assert encoded == "<pre>-Xlt--Xcr--Xnl--Xws9--Xws--Xgt--Xwsa0-</pre>"

    def test_opening_tag_attributes_untouched(self):
        config = make_config("pre")
        encoded = encode_ignored_elements('<pre class="a b">x y</pre>', config)

        assert encoded == '<pre class="a b">x-Xws-y</pre>'

    def test_tag_name_boundary(self):
        config = make_config("pre")
        html = "<prefix>a b</prefix>"

        assert encode_ignored_elements(html, config) == html

    def test_case_insensitive(self):
        config = make_config("pre")
        assert encode_ignored_elements("<PRE>a b</PRE>", config) == "<PRE>a-Xws-b</PRE>"

    def test_multiple_elements(self):
        config = make_config("code")
        encoded = encode_ignored_elements("<code>a b</code> <code>c d</code>", config)

        assert encoded == "<code>a-Xws-b</code> <code>c-Xws-d</code>"

    def test_unclosed_element_untouched(self):
        config = make_config("pre")
        html = "<pre>a b"

        assert encode_ignored_elements(html, config) == html

    def test_markup_between_elements_untouched(self):
        config = make_config("script")
        html = '<script>s = "<script>";</script>\n<p>  x  </p>\n<script>b()</script>'
        encoded = encode_ignored_elements(html, config)

        assert "\n<p>  x  </p>\n<script>b()</script>" in encoded
        assert decode_ignored_elements(encoded, config) == html

    def test_no_ignore_tags(self):
        config = validate_config({})
        html = "<pre>a b</pre>"

        assert encode_ignored_elements(html, config) == html

    def test_marker_is_escaped(self):
        config = make_config("pre", ignore_with="a.b*")
        encoded = encode_ignored_elements("<pre>x y</pre>", config)

        assert encoded == "<pre>x-a.b*ws-y</pre>"
        assert decode_ignored_elements(encoded, config) == "<pre>x y</pre>"


class TestDecodeIgnoredElements:
    SAMPLES = [
        '<script>var a = "<b>";</script>',
        "<div>\n  <pre>\n  line 1\n\tline 2\r\n</pre>\n</div>",
        '<script type="text/javascript">\nif (a < b && c > d) {\n  go();\n}\n</script>',
        "<pre><pre>nested  pre</pre> tail </pre>",
        '<script>document.write("<script>x</script>");</script>',
        "<pre>a b</pre><p>c d</p><pre>e\nf</pre>",
        "<pre/> <pre>a b</pre>",
    ]

    @pytest.mark.parametrize("html", SAMPLES)
    def test_round_trip(self, html):
        config = make_config("script", "pre")
        assert decode_ignored_elements(encode_ignored_elements(html, config), config) == html

    @pytest.mark.parametrize("html", SAMPLES)
    def test_round_trip_default_marker(self, html):
        config = validate_config({"ignore": ["pre", "script"]})
        assert decode_ignored_elements(encode_ignored_elements(html, config), config) == html

    def test_nested_ignored_elements_of_different_names(self):
        config = make_config("pre", "code")
        for html in ("<pre><code>a b</code></pre>", "<code><pre>a b</pre></code>"):
            encoded = encode_ignored_elements(html, config)
            assert " " not in encoded
            assert decode_ignored_elements(encoded, config) == html

    def test_decode_only_inside_spans(self):
        config = make_config("pre")
        html = "<p>-Xws-</p>"

        assert decode_ignored_elements(html, config) == html


class TestFindElementSpans:
    def test_simple(self):
        html = "<pre>abc</pre>"
        assert find_element_spans(html, "pre") == [(5, 8)]

    def test_nested_same_name(self):
        html = "<div><div>a</div>b</div>"
        spans = find_element_spans(html, "div")

        # The outer <div> ends at the first </div>
        assert spans == [(5, 11)]
        assert html[5:11] == "<div>a"

    def test_nearest_closing_tag(self):
        html = '<script>s = "<script>";</script>'
        spans = find_element_spans(html, "script")

        assert spans == [(8, len(html) - len("</script>"))]

    def test_string_literal_does_not_join_elements(self):
        html = '<script>s = "<script>";</script>\n<p>x</p>\n<script>b()</script>'
        spans = find_element_spans(html, "script")

        assert [html[start:end] for start, end in spans] == ['s = "<script>";', "b()"]

    def test_self_closing_skipped(self):
        assert find_element_spans("<pre/><pre>x</pre>", "pre") == [(11, 12)]

    def test_stray_closing_tag_ignored(self):
        assert find_element_spans("</pre><pre>x</pre>", "pre") == [(11, 12)]
