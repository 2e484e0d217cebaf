"""
Test suite for frontkit.

Contains unit tests for the scanning and parsing engines, the diagnostics
helpers, and end-to-end tests driving a small arithmetic language.
"""
