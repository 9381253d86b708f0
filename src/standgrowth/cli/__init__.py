"""Command line interface for standgrowth."""
