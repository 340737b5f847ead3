"""
Tests for the internal helpers (Unset, nullify, rename, ordinal).

Conventions
- Test method names follow CamelCase per project convention.
"""
import unittest
from unittest import TestCase

from sigilopt.utils import UnsetType, Unset, nullify, rename, ordinal


class TestUnset(TestCase):

    def testSingleton(self):
        self.assertIs(UnsetType(), Unset)

    def testFalsyAndRepr(self):
        self.assertFalse(Unset)
        self.assertEqual(repr(Unset), "Unset")

    def testFinal(self):
        with self.assertRaises(TypeError):
            type("Derived", (UnsetType,), {})

    def testNullify(self):
        self.assertEqual(nullify(Unset, "fallback"), "fallback")
        self.assertIsNone(nullify(Unset))
        self.assertIsNone(nullify(None, "fallback"))
        self.assertEqual(nullify(0, 5), 0)


class TestRename(TestCase):

    def testFunctionForm(self):
        def work():
            pass
        rename(work, "renamed")
        self.assertEqual((work.__name__, work.__qualname__), ("renamed", "renamed"))

    def testCurriedForm(self):
        @rename("renamed")
        def work():
            pass
        self.assertEqual(work.__name__, "renamed")

    def testNameMustBeString(self):
        with self.assertRaises(TypeError):
            rename(lambda: None, 3)


class TestOrdinal(TestCase):

    def testWords(self):
        self.assertEqual(ordinal(1), "first")
        self.assertEqual(ordinal(3), "third")
        self.assertEqual(ordinal(10), "tenth")

    def testSuffixes(self):
        self.assertEqual(ordinal(11), "11th")
        self.assertEqual(ordinal(12), "12th")
        self.assertEqual(ordinal(21), "21st")
        self.assertEqual(ordinal(22), "22nd")
        self.assertEqual(ordinal(23), "23rd")
        self.assertEqual(ordinal(111), "111th")
        self.assertEqual(ordinal(104), "104th")


if __name__ == '__main__':
    unittest.main()
