"""Validation, object walking and key-case conversion."""
