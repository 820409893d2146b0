"""Regression tests for cart and checkout."""
