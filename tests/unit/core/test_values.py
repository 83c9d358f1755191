"""
Test cases for the value tree types.
"""

import unittest

from relaxjson.core.values import (
    Array,
    Boolean,
    Null,
    Number,
    Object,
    String,
    ValueKind,
    from_python,
)


class TestValueEquality(unittest.TestCase):

    def test_variants_compare_by_kind_and_payload(self):
        self.assertEqual(Number(1.0), Number(1.0))
        self.assertNotEqual(Number(1.0), Boolean(True))
        self.assertNotEqual(String("null"), Null())
        self.assertEqual(Null(), Null())

    def test_object_equality_ignores_key_order(self):
        first = Object({"a": Number(1.0), "b": Number(2.0)})
        second = Object({"b": Number(2.0), "a": Number(1.0)})
        self.assertEqual(first, second)

    def test_array_equality_respects_order(self):
        self.assertNotEqual(
            Array([Number(1.0), Number(2.0)]), Array([Number(2.0), Number(1.0)])
        )

    def test_kinds(self):
        values = [Null(), Boolean(False), Number(0.0), String(""), Array(), Object()]
        self.assertEqual(
            [v.kind for v in values],
            [
                ValueKind.NULL, ValueKind.BOOLEAN, ValueKind.NUMBER,
                ValueKind.STRING, ValueKind.ARRAY, ValueKind.OBJECT,
            ],
        )


class TestContainerAccess(unittest.TestCase):
    """Member lookup and iteration used by tree walkers."""

    def setUp(self):
        self.obj = Object({
            "name": String("api"),
            "tags": Array([String("a"), String("b")]),
        })

    def test_object_lookup(self):
        self.assertEqual(self.obj["name"], String("api"))
        self.assertIn("tags", self.obj)
        self.assertNotIn("missing", self.obj)
        self.assertIsNone(self.obj.get("missing"))
        self.assertEqual(self.obj.get("missing", Null()), Null())
        self.assertEqual(set(self.obj.keys()), {"name", "tags"})
        self.assertEqual(len(self.obj), 2)

        with self.assertRaises(KeyError):
            self.obj["missing"]  # pylint: disable=pointless-statement

    def test_array_iteration(self):
        tags = self.obj["tags"]
        self.assertEqual([t.value for t in tags], ["a", "b"])
        self.assertEqual(tags[1], String("b"))
        self.assertEqual(len(tags), 2)


class TestPythonConversion(unittest.TestCase):

    def test_to_python(self):
        tree = Object({
            "n": Null(),
            "b": Boolean(True),
            "x": Number(8080.0),
            "s": String("hi"),
            "a": Array([Number(1.0), Object({})]),
        })
        self.assertEqual(
            tree.to_python(),
            {"n": None, "b": True, "x": 8080.0, "s": "hi", "a": [1.0, {}]},
        )

    def test_from_python(self):
        tree = from_python({"flag": False, "count": 3, "items": (None, "x")})
        self.assertEqual(
            tree,
            Object({
                "flag": Boolean(False),
                "count": Number(3.0),
                "items": Array([Null(), String("x")]),
            }),
        )
        self.assertIsInstance(tree["count"].value, float)

    def test_from_python_keeps_values(self):
        value = String("already")
        self.assertIs(from_python(value), value)

    def test_from_python_rejects_unsupported(self):
        with self.assertRaises(TypeError):
            from_python({1: "x"})
        with self.assertRaises(TypeError):
            from_python(object())


if __name__ == '__main__':
    unittest.main()
