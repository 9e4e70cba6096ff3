"""Fake host objects and mock data for tests."""
