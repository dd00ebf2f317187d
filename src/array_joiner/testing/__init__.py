"""Helpers for testing joiners and graph implementations."""
