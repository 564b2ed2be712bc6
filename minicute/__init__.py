"""Unit-testing toolkit: assertions, rendering of values, cases, suites, listeners, ranges and enum stepping."""

__version__ = "0.1.0"