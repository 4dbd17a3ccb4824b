"""Shared constants for Autopass."""
