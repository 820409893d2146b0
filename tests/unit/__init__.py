"""Browser-free unit tests."""
