# python
"""
Parsing module behavioral tests (sanitize, assemble, parse, parseargs).

Scope
- Validate flags, option bundles, negation, escape marker and positionals.
- Validate the repeated-flag merge (nested pairs by default, flat on request).
- Validate the fault boundary: invalid prompts and internal failures surface as
  one ParseFault, never as a partial mapping.

Conventions
- Test method names follow CamelCase per project convention.
- Tests use the public API (parse, parseargs, sanitize, assemble).
"""

from __future__ import annotations

import unittest
from unittest import TestCase, mock

from gargs import parse, parseargs, sanitize, assemble, ParseFault, FaultCode


class TestParse(TestCase):
    """Behavioral tests for the full pipeline."""

    def testMixedArguments(self):
        parsed = parse(["a", "b", "--x", "1", "-yz", "--no-flag"])
        self.assertEqual(parsed["_"], ["a", "b"])
        self.assertIsInstance(parsed["x"], float)
        self.assertEqual(parsed["x"], 1.0)
        self.assertIs(parsed["y"], True)
        self.assertIs(parsed["z"], True)
        self.assertIs(parsed["flag"], False)
        self.assertEqual(set(parsed), {"_", "x", "y", "z", "flag"})

    def testEmptyInput(self):
        self.assertEqual(parse([]), {"_": []})

    def testInlineValue(self):
        self.assertEqual(parse(["--name=value"]), {"_": [], "name": "value"})

    def testInlineValueSplitsOnFirstEqualsOnly(self):
        self.assertEqual(parse(["--expr=a=b"])["expr"], "a=b")

    def testEmptyInlineValue(self):
        self.assertEqual(parse(["--name="])["name"], "")

    def testFlagAtEndIsTrue(self):
        self.assertIs(parse(["--flag"])["flag"], True)

    def testFlagFollowedByFlag(self):
        parsed = parse(["--a", "--b"])
        self.assertIs(parsed["a"], True)
        self.assertIs(parsed["b"], True)

    def testFlagFollowedByFlagKeepsItsValue(self):
        parsed = parse(["--a", "--b", "2"])
        self.assertIs(parsed["a"], True)
        self.assertEqual(parsed["b"], 2.0)

    def testRepeatedFlagNestsOnThirdOccurrence(self):
        parsed = parse(["--x=1", "--x=2", "--x=3"])
        self.assertEqual(parsed["x"], [[1.0, 2.0], 3.0])

    def testRepeatedFlagPair(self):
        self.assertEqual(parse(["--x", "a", "--x", "b"])["x"], ["a", "b"])

    def testRepeatedFlagFlattened(self):
        parsed = parse(["--x=1", "--x=2", "--x=3"], flatten=True)
        self.assertEqual(parsed["x"], [1.0, 2.0, 3.0])

    def testStoredBooleanIsOverwritten(self):
        # a bare flag stores True, the next occurrence replaces it
        self.assertEqual(parse(["--x", "--x", "5"])["x"], 5.0)

    def testOptionBundleOverwrittenByFlag(self):
        self.assertEqual(parse(["-x", "--x", "5"])["x"], 5.0)

    def testBooleanValueIsOverwrittenToo(self):
        self.assertIs(parse(["--x", "true", "--x", "false"])["x"], False)

    def testEscapeMarker(self):
        self.assertEqual(parse(["a", "--", "b", "--c"]), {"_": ["a", "b", "--c"]})

    def testEscapedValuesAreCoerced(self):
        self.assertEqual(parse(["--", "1", "0x10", "-v"])["_"], [1.0, 16, "-v"])

    def testEscapedValuesComeAfterPositionals(self):
        parsed = parse(["a", "--flag", "v", "b", "--", "c"])
        self.assertEqual(parsed["_"], ["a", "b", "c"])
        self.assertEqual(parsed["flag"], "v")

    def testRepeatedEscapeMarkerDropped(self):
        self.assertEqual(parse(["--", "a", "--", "b"])["_"], ["a", "b"])

    def testSeparatedDigitsFlagValue(self):
        parsed = parse(["--n", "1_2.5e1_0", "--m=0x1_0p0"])
        self.assertEqual(parsed["n"], 1.25e11)
        self.assertEqual(parsed["m"], 16.0)

    def testPositionalsAreCoerced(self):
        self.assertEqual(parse(["1", "0x1A", "true", "x"])["_"], [1.0, 26, True, "x"])

    def testNegativeNumberIsAnOptionBundle(self):
        parsed = parse(["-5"])
        self.assertIs(parsed["5"], True)
        self.assertEqual(parsed["_"], [])

    def testLoneDashSetsNothing(self):
        self.assertEqual(parse(["-"]), {"_": []})

    def testNegationWithExplicitTrue(self):
        self.assertIs(parse(["--no-color", "true"])["color"], False)

    def testNegationWithOtherValueKeepsKey(self):
        parsed = parse(["--no-color", "false"])
        self.assertIs(parsed["no-color"], False)
        self.assertNotIn("color", parsed)

    def testTokensAreTrimmed(self):
        parsed = parse(["  --name=x  ", " -- ", " y "])
        self.assertEqual(parsed["name"], "x")
        self.assertEqual(parsed["_"], ["y"])

    def testTuplePromptAccepted(self):
        self.assertEqual(parse(("a",)), {"_": ["a"]})

    def testFreshMappingPerCall(self):
        first = parse(["--x", "1"])
        second = parse(["--x", "1"])
        self.assertIsNot(first, second)
        self.assertEqual(second["x"], 1.0)


class TestParseFaults(TestCase):
    """Behavioral tests for the single fault boundary."""

    def testStringPromptRejected(self):
        with self.assertRaises(ParseFault) as context:
            parse("--x 1")  # type: ignore[arg-type]
        self.assertIs(context.exception.code, FaultCode.INVALID_PROMPT)

    def testNonIterablePromptRejected(self):
        with self.assertRaises(ParseFault):
            parse(42)  # type: ignore[arg-type]

    def testNonStringTokenRejected(self):
        with self.assertRaises(ParseFault) as context:
            parse(["--x", 1])  # type: ignore[list-item]
        self.assertIs(context.exception.code, FaultCode.INVALID_PROMPT)
        self.assertIn("position 1", context.exception.message)
        self.assertEqual(set(context.exception.options), {"title", "code", "hint", "shell", "fancy", "colorful"})

    def testInternalFaultIsWrapped(self):
        with mock.patch("gargs.parsing.coerce", side_effect=RuntimeError("boom")):
            with self.assertRaises(ParseFault) as context:
                parse(["a"])
        self.assertIs(context.exception.code, FaultCode.PARSE_FAULT)
        self.assertIsInstance(context.exception.__cause__, RuntimeError)


class TestParseargs(TestCase):
    """Behavioral tests for the process-argument entry points."""

    def testUsesProcessArguments(self):
        with mock.patch("sys.argv", ["prog", "--x", "1", "pos"]):
            self.assertEqual(parseargs(), {"_": ["pos"], "x": 1.0})

    def testParseWithoutArgumentsUsesProcessArguments(self):
        with mock.patch("sys.argv", ["prog", "-v"]):
            self.assertEqual(parse(), {"_": [], "v": True})

    def testFlattenForwarded(self):
        with mock.patch("sys.argv", ["prog", "--x=1", "--x=2", "--x=3"]):
            self.assertEqual(parseargs(flatten=True)["x"], [1.0, 2.0, 3.0])


class TestStages(TestCase):
    """Behavioral tests for each stage on its own."""

    def testSanitizeSplitsAndResolvesOptions(self):
        parsed = {}
        tokens, escaped = sanitize(["--k=v", "-ab", "p", "--", "--z"], parsed)
        self.assertEqual(tokens, ["--k", "v", "p"])
        self.assertEqual(escaped, ["--z"])
        self.assertEqual(parsed, {"a": True, "b": True})

    def testSanitizeKeepsPlainTokenUntrimmed(self):
        tokens, _ = sanitize([" p "], {})
        self.assertEqual(tokens, [" p "])

    def testAssembleAppendsEscapedLast(self):
        parsed = assemble(["p", "--k", "v", "q"], [1.0], {"_": []})
        self.assertEqual(parsed, {"_": ["p", "q", 1.0], "k": "v"})


if __name__ == "__main__":
    unittest.main()
