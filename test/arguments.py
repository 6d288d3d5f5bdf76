"""
Arguments module behavioral tests.

Scope
- Validate public specs (Argument, Option, Flag): construction, normalization and defaults.
- Validate metadata constraints (names, prefixes, default values, cardinality bounds).
- Validate consumer forwarding through __call__ and checker evaluation through accepts().
- Validate introspection (read-only properties, repr).

Conventions
- Test method names follow CamelCase per project convention.
- Specs are built directly here; registry rules live in the configuration tests.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from commandline import Argument, Option, Flag, Kind, ConfigurationError


class TestArgument(TestCase):
    """Behavioral tests for positional Argument specifications."""

    def testDefaults(self):
        argument = Argument("file")
        self.assertEqual(argument.name, "file")
        self.assertEqual(argument.position, 0)
        self.assertTrue(argument.required)
        self.assertEqual(argument.default, ())
        self.assertEqual(argument.description, "")
        self.assertIs(argument.kind, Kind.ARGUMENT)

    def testNameIsTrimmed(self):
        self.assertEqual(Argument("  file ").name, "file")

    def testEmptyNameRejected(self):
        with self.assertRaises(ValueError):
            Argument("   ")

    def testNonStringNameRejected(self):
        with self.assertRaises(TypeError):
            Argument(42)

    def testSingleDefaultIsNormalizedToTuple(self):
        self.assertEqual(Argument("n", default="0").default, ("0",))

    def testIterableDefaultKeepsOrder(self):
        self.assertEqual(Argument("n", default=["1st", "2nd"]).default, ("1st", "2nd"))

    def testEmptyDefaultValueRejected(self):
        with self.assertRaises(ValueError):
            Argument("n", default=["1", ""])

    def testNonStringDefaultRejected(self):
        with self.assertRaises(TypeError):
            Argument("n", default=[1])

    def testNegativePositionRejected(self):
        with self.assertRaises(TypeError):
            Argument("n", -1)

    def testCheckerAcceptsEverythingByDefault(self):
        self.assertTrue(Argument("n").accepts("anything"))

    def testCheckerIsApplied(self):
        argument = Argument("n", checker=str.isdigit)
        self.assertTrue(argument.accepts("12"))
        self.assertFalse(argument.accepts("x"))

    def testNonCallableCheckerRejected(self):
        with self.assertRaises(TypeError):
            Argument("n", checker="digits")

    def testCallForwardsToConsumer(self):
        received = []
        argument = Argument("n", consumer=received.append)
        argument("7")
        self.assertEqual(received, ["7"])

    def testPropertiesAreReadOnly(self):
        argument = Argument("n")
        with self.assertRaises(AttributeError):
            argument.name = "m"

    def testRepr(self):
        self.assertEqual(
            repr(Argument("n", 1, False, default="0")),
            "argument(name='n', position=1, required=False, default=('0',), description='')",
        )


class TestOption(TestCase):
    """Behavioral tests for prefixed Option specifications."""

    def testDefaults(self):
        option = Option("operation", ("-o", "--operation"))
        self.assertEqual(option.prefixes, ("-o", "--operation"))
        self.assertFalse(option.required)
        self.assertEqual(option.max_values, 1)
        self.assertEqual(option.default, ())
        self.assertIs(option.kind, Kind.OPTION)

    def testSinglePrefixString(self):
        self.assertEqual(Option("o", "-o").prefixes, ("-o",))

    def testMissingPrefixRejected(self):
        with self.assertRaises(TypeError):
            Option("o", ())

    def testMalformedPrefixesRejected(self):
        for prefix in ("o", "-", "--", "-ab", "--a b", "--a=b", "- "):
            with self.subTest(prefix=prefix):
                with self.assertRaises(ValueError):
                    Option("o", prefix)

    def testDuplicatePrefixInsideOneSpecRejected(self):
        with self.assertRaises(ValueError):
            Option("o", ("-o", "-o"))

    def testMaxValuesBelowOneRejected(self):
        with self.assertRaises(ConfigurationError):
            Option("o", "-o", max_values=0)

    def testMaxValuesMustBeInteger(self):
        with self.assertRaises(TypeError):
            Option("o", "-o", max_values="2")

    def testCallForwardsToConsumer(self):
        received = []
        Option("o", "-o", consumer=received.append)("v")
        self.assertEqual(received, ["v"])

    def testDefaultIsTuple(self):
        self.assertEqual(Option("o", "-o", default="sum").default, ("sum",))


class TestFlag(TestCase):
    """Behavioral tests for presence-only Flag specifications."""

    def testDefaults(self):
        flag = Flag("verbose", ("-v", "--verbose"))
        self.assertEqual(flag.prefixes, ("-v", "--verbose"))
        self.assertFalse(flag.required)
        self.assertEqual(flag.max_occurrences, 1)
        self.assertIs(flag.kind, Kind.FLAG)

    def testMaxOccurrencesBelowOneRejected(self):
        with self.assertRaises(ConfigurationError):
            Flag("v", "-v", max_occurrences=0)

    def testCallFiresConsumerWithoutArguments(self):
        calls = []
        flag = Flag("v", "-v", consumer=lambda: calls.append(True))
        flag()
        flag()
        self.assertEqual(calls, [True, True])

    def testNonCallableConsumerRejected(self):
        with self.assertRaises(TypeError):
            Flag("v", "-v", consumer=1)

    def testRepr(self):
        self.assertEqual(
            repr(Flag("v", "-v")),
            "flag(name='v', prefixes=('-v',), required=False, max_occurrences=1, description='')",
        )


if __name__ == "__main__":
    unittest.main()
