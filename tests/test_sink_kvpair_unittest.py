import io
import unittest

from jsongen.kvpair import KeyValuePairs
from jsongen.sink import StreamSink, StringSink


class TestStringSink(unittest.TestCase):
    def test_append_and_reset(self):
        sink = StringSink()
        self.assertEqual(sink.getvalue(), "")
        sink.append("ab")
        sink.append("")
        sink.append("c")
        self.assertEqual(sink.getvalue(), "abc")
        self.assertEqual(str(sink), "abc")
        self.assertEqual(len(sink), 3)
        sink.reset()
        self.assertEqual(sink.getvalue(), "")
        self.assertEqual(len(sink), 0)

    def test_append_after_getvalue(self):
        sink = StringSink()
        sink.append("a")
        sink.append("b")
        self.assertEqual(sink.getvalue(), "ab")
        sink.append("c")
        self.assertEqual(sink.getvalue(), "abc")


class TestStreamSink(unittest.TestCase):
    def test_forwards_to_stream(self):
        buf = io.StringIO()
        sink = StreamSink(buf)
        sink.append("[")
        sink.append("]")
        self.assertEqual(buf.getvalue(), "[]")


class TestKeyValuePairs(unittest.TestCase):
    def test_insertion_order_with_duplicates(self):
        kvp = KeyValuePairs()
        kvp.add("b", "1")
        kvp.add("a", "2")
        kvp.add("b", "3")
        self.assertEqual(list(kvp), [("b", "1"), ("a", "2"), ("b", "3")])
        self.assertEqual(kvp.keys(), ["b", "a", "b"])
        self.assertEqual(len(kvp), 3)

    def test_get_returns_first_match(self):
        kvp = KeyValuePairs([("k", "first"), ("k", "second")])
        self.assertEqual(kvp.get("k"), "first")
        self.assertIsNone(kvp.get("missing"))
        self.assertEqual(kvp.get("missing", "d"), "d")

    def test_clear(self):
        kvp = KeyValuePairs([("a", "b")])
        kvp.clear()
        self.assertEqual(len(kvp), 0)
        self.assertEqual(list(kvp), [])

    def test_rejects_non_string(self):
        kvp = KeyValuePairs()
        with self.assertRaises(TypeError):
            kvp.add("a", None)  # type: ignore[arg-type]
        with self.assertRaises(TypeError):
            kvp.add(1, "a")  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
