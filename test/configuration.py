"""
Configuration registry behavioral tests.

Scope
- Validate the built-in help flag and registration order of arguments, options and flags.
- Validate uniqueness of names (across kinds) and prefixes (including long-prefix overlap).
- Validate argument ordering rules (required after optional, multiple defaults only last).
- Validate atomic registration: rejected calls leave the registry unchanged.
- Validate lookups, the trailing-argument cap and validator registration.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import itertools
import unittest
from unittest import TestCase

from commandline import (
    Configuration,
    ConfigurationError,
    DuplicateNameError,
    DuplicatePrefixError,
    FaultCode,
    Kind,
)


class TestConfigurationBasics(TestCase):
    """Construction, built-ins and lookups."""

    def testHelpFlagIsBuiltIn(self):
        configuration = Configuration()
        help = configuration.flag_by_prefix("-h")
        self.assertIsNotNone(help)
        self.assertEqual(help.name, "help")
        self.assertIs(configuration.flag_by_prefix("--help"), help)
        self.assertEqual(help.description, "print help information and exit")
        self.assertIs(configuration.kind_of("help"), Kind.FLAG)

    def testRegistrationOrderIsKept(self):
        configuration = Configuration()
        first = configuration.add_required_argument("first")
        second = configuration.add_optional_argument("second")
        self.assertEqual(configuration.arguments, (first, second))
        self.assertEqual((first.position, second.position), (0, 1))
        self.assertTrue(first.required)
        self.assertFalse(second.required)

    def testPrefixLookups(self):
        configuration = Configuration()
        option = configuration.add_option("operation", "-o", "--operation")
        flag = configuration.add_flag("verbose", "-v")
        self.assertIs(configuration.option_by_prefix("--operation"), option)
        self.assertIsNone(configuration.option_by_prefix("-v"))
        self.assertIs(configuration.flag_by_prefix("-v"), flag)
        self.assertTrue(configuration.has_flag_with_prefix("-v"))
        self.assertFalse(configuration.has_flag_with_prefix("-o"))
        self.assertTrue(configuration.is_prefix_registered("-o"))
        self.assertFalse(configuration.is_prefix_registered("-x"))

    def testKindOf(self):
        configuration = Configuration()
        configuration.add_required_argument("file")
        configuration.add_option("mode", "-m")
        self.assertIs(configuration.kind_of("file"), Kind.ARGUMENT)
        self.assertIs(configuration.kind_of("mode"), Kind.OPTION)
        self.assertIsNone(configuration.kind_of("missing"))

    def testCollectionsAreReadOnly(self):
        configuration = Configuration()
        self.assertIsInstance(configuration.options, tuple)
        self.assertIsInstance(configuration.flags, tuple)
        with self.assertRaises(AttributeError):
            configuration.options = ()

    def testDescription(self):
        configuration = Configuration("Does things")
        self.assertEqual(configuration.description, "Does things")
        configuration.description = "Does other things"
        self.assertEqual(configuration.description, "Does other things")
        with self.assertRaises(TypeError):
            configuration.description = None

    def testUsageAndHelpGeneratorAreExclusive(self):
        with self.assertRaises(TypeError):
            Configuration(usage="tool", help_generator=lambda configuration: "")

    def testCustomHelpGenerator(self):
        configuration = Configuration(help_generator=lambda configuration: "custom help")
        self.assertEqual(configuration.help(), "custom help")
        self.assertEqual(str(configuration), "custom help")


class TestConfigurationNames(TestCase):
    """Name uniqueness across arguments, options and flags."""

    def testDuplicateArgumentName(self):
        configuration = Configuration()
        configuration.add_required_argument("x")
        with self.assertRaises(DuplicateNameError) as context:
            configuration.add_optional_argument("x")
        self.assertEqual(str(context.exception), "configuration already has argument <x>")
        self.assertEqual(context.exception.code, FaultCode.DUPLICATE_NAME)

    def testNamesAreSharedAcrossKinds(self):
        configuration = Configuration()
        configuration.add_option("x", "-x")
        with self.assertRaises(DuplicateNameError):
            configuration.add_flag("x", "-y")
        with self.assertRaises(DuplicateNameError):
            configuration.add_required_argument("x")

    def testNamesAreSharedAcrossEveryOrderingOfKinds(self):
        registrations = {
            "argument": lambda configuration: configuration.add_required_argument("x"),
            "option": lambda configuration: configuration.add_option("x", "-o"),
            "flag": lambda configuration: configuration.add_flag("x", "-f"),
        }
        for first, second in itertools.permutations(registrations, 2):
            with self.subTest(first=first, second=second):
                configuration = Configuration()
                registrations[first](configuration)
                with self.assertRaises(DuplicateNameError) as context:
                    registrations[second](configuration)
                self.assertEqual(str(context.exception), f"configuration already has {first} <x>")

    def testHelpNameIsTaken(self):
        with self.assertRaisesRegex(DuplicateNameError, "flag <help>"):
            Configuration().add_option("help", "-H")

    def testDuplicateNameIsAlsoAValueError(self):
        with self.assertRaises(ValueError):
            Configuration().add_flag("help", "-H")


class TestConfigurationPrefixes(TestCase):
    """Prefix uniqueness and long-prefix overlap."""

    def testDuplicatePrefixAcrossKinds(self):
        configuration = Configuration()
        configuration.add_option("o", "-o")
        with self.assertRaises(DuplicatePrefixError) as context:
            configuration.add_flag("f", "-o")
        self.assertEqual(str(context.exception), "configuration already has <-o> option/flag with prefix")

    def testHelpPrefixesAreTaken(self):
        with self.assertRaises(DuplicatePrefixError):
            Configuration().add_flag("hidden", "-h")
        with self.assertRaises(DuplicatePrefixError):
            Configuration().add_option("helper", "--help")

    def testLongPrefixOverlapFlagFirst(self):
        configuration = Configuration()
        configuration.add_flag("f", "--opt")
        with self.assertRaises(DuplicatePrefixError) as context:
            configuration.add_option("o", "--option")
        self.assertEqual(str(context.exception), "Option --opt is a prefix of option --option")

    def testLongPrefixOverlapOptionFirst(self):
        configuration = Configuration()
        configuration.add_option("o", "--option")
        with self.assertRaises(DuplicatePrefixError):
            configuration.add_flag("f", "--opt")

    def testLongPrefixOverlapInsideOneEntity(self):
        with self.assertRaises(DuplicatePrefixError):
            Configuration().add_option("o", "--out", "--output")

    def testShortPrefixesNeverOverlapLongOnes(self):
        configuration = Configuration()
        configuration.add_flag("o", "-o")
        configuration.add_option("output", "--o")
        self.assertTrue(configuration.is_prefix_registered("--o"))

    def testMalformedPrefixRejected(self):
        with self.assertRaises(ValueError):
            Configuration().add_option("o", "o")


class TestConfigurationArguments(TestCase):
    """Ordering and default-value rules of positional arguments."""

    def testRequiredAfterOptionalRejected(self):
        configuration = Configuration()
        configuration.add_optional_argument("a")
        with self.assertRaises(ConfigurationError):
            configuration.add_required_argument("b")

    def testOptionalAfterRequiredAllowed(self):
        configuration = Configuration()
        configuration.add_required_argument("a")
        configuration.add_optional_argument("b")
        self.assertEqual(len(configuration.arguments), 2)

    def testMultipleDefaultsOnlyOnLastArgument(self):
        configuration = Configuration()
        configuration.add_optional_argument("a", default=["1", "2"])
        with self.assertRaises(ConfigurationError):
            configuration.add_optional_argument("b")

    def testMultipleDefaultsAlsoBlockRequiredArguments(self):
        configuration = Configuration()
        configuration.add_required_argument("a", default=["1", "2"])
        with self.assertRaises(ConfigurationError):
            configuration.add_required_argument("b")

    def testSingleDefaultDoesNotBlock(self):
        configuration = Configuration()
        configuration.add_optional_argument("a", default="1")
        configuration.add_optional_argument("b", default=["2", "3"])
        self.assertEqual(configuration.arguments[1].default, ("2", "3"))


class TestConfigurationAtomicity(TestCase):
    """Rejected registrations leave no trace."""

    def testRejectedPrefixDoesNotTakeTheName(self):
        configuration = Configuration()
        configuration.add_option("o", "-o")
        with self.assertRaises(DuplicatePrefixError):
            configuration.add_flag("f", "-x", "-o")
        self.assertIsNone(configuration.kind_of("f"))
        self.assertFalse(configuration.is_prefix_registered("-x"))
        configuration.add_flag("f", "-x")
        self.assertTrue(configuration.has_flag_with_prefix("-x"))

    def testRejectedArgumentDoesNotShiftPositions(self):
        configuration = Configuration()
        configuration.add_optional_argument("a")
        with self.assertRaises(ConfigurationError):
            configuration.add_required_argument("b")
        self.assertIsNone(configuration.kind_of("b"))
        self.assertEqual(configuration.add_optional_argument("c").position, 1)

    def testRejectedSpecDoesNotTakeTheName(self):
        configuration = Configuration()
        with self.assertRaises(ConfigurationError):
            configuration.add_option("o", "-o", max_values=0)
        self.assertIsNone(configuration.kind_of("o"))
        self.assertFalse(configuration.is_prefix_registered("-o"))


class TestConfigurationLimits(TestCase):
    """Trailing-argument cap and validators."""

    def testMaxLastArgumentSizeDefaultsToUnbounded(self):
        self.assertIsNone(Configuration().max_last_argument_size)

    def testMaxLastArgumentSizeBelowOneRejected(self):
        configuration = Configuration()
        with self.assertRaises(ConfigurationError):
            configuration.max_last_argument_size = 0
        self.assertIsNone(configuration.max_last_argument_size)

    def testMaxLastArgumentSizeMustBeInteger(self):
        with self.assertRaises(TypeError):
            Configuration().max_last_argument_size = "3"

    def testMaxLastArgumentSizeCanBeReset(self):
        configuration = Configuration()
        configuration.max_last_argument_size = 3
        self.assertEqual(configuration.max_last_argument_size, 3)
        configuration.max_last_argument_size = None
        self.assertIsNone(configuration.max_last_argument_size)

    def testValidatorsKeepOrder(self):
        configuration = Configuration()

        def first(*unused):
            pass

        def second(*unused):
            pass

        self.assertIs(configuration.add_validator(first), first)
        configuration.add_validator(second)
        self.assertEqual(configuration.validators, (first, second))

    def testNonCallableValidatorRejected(self):
        with self.assertRaises(TypeError):
            Configuration().add_validator("not callable")


if __name__ == "__main__":
    unittest.main()
