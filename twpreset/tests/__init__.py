"""Test suites for twpreset."""
