"""Smoke tests for the storefront login."""
