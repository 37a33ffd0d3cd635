import json
import unittest

from jsongen.escape import escape_string, quote_string


class TestEscape(unittest.TestCase):
    def test_plain_text_passes_through(self):
        self.assertEqual(escape_string("abc def"), "abc def")
        self.assertEqual(escape_string(""), "")

    def test_non_ascii_passes_through(self):
        self.assertEqual(escape_string("žluťoučký 日本"), "žluťoučký 日本")

    def test_mandatory_escapes(self):
        self.assertEqual(escape_string('"'), '\\"')
        self.assertEqual(escape_string("\\"), "\\\\")
        self.assertEqual(escape_string("/"), "\\/")

    def test_named_controls(self):
        self.assertEqual(escape_string("\b\f\n\r\t"), "\\b\\f\\n\\r\\t")

    def test_other_controls_use_lowercase_unicode_escape(self):
        self.assertEqual(escape_string("\x01"), "\\u0001")
        self.assertEqual(escape_string("\x1b"), "\\u001b")
        self.assertEqual(escape_string("\x1f"), "\\u001f")
        self.assertEqual(escape_string("\x7f"), "\\u007f")
        self.assertEqual(escape_string("\x00"), "\\u0000")

    def test_mixed_sequence(self):
        self.assertEqual(
            quote_string("\x01\a\b\f\n\r\t\v\\/\"\x7f"),
            '"\\u0001\\u0007\\b\\f\\n\\r\\t\\u000b\\\\\\/\\"\\u007f"',
        )

    def test_html_closing_tag_is_not_embedded(self):
        self.assertNotIn("</", quote_string("</script>"))

    def test_quoted_text_decodes_back(self):
        for text in ("", "a\"b", "</a>", "".join(chr(c) for c in range(0x80)), "x y"):
            self.assertEqual(json.loads(quote_string(text)), text)

    def test_rejects_non_str(self):
        with self.assertRaises(TypeError):
            escape_string(b"abc")  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
