"""Command-line interface for Autopass entries."""
