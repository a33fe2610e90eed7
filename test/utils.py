# python
"""
Utils module behavioral tests (Unset sentinel and coalesce).

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from gargs.utils import Unset, UnsetType, coalesce


class TestUnset(TestCase):

    def testSingleton(self):
        self.assertIs(UnsetType(), Unset)

    def testFalsyAndRepr(self):
        self.assertFalse(Unset)
        self.assertEqual(repr(Unset), "Unset")

    def testFinal(self):
        with self.assertRaises(TypeError):
            class Derived(UnsetType):  # NOQA: F-841
                pass


class TestCoalesce(TestCase):

    def testUnsetResolvesToDefault(self):
        self.assertEqual(coalesce(Unset, ["a"]), ["a"])

    def testFalseyValuesPreserved(self):
        self.assertEqual(coalesce([], ["a"]), [])
        self.assertIsNone(coalesce(None, "fallback"))


if __name__ == "__main__":
    unittest.main()
