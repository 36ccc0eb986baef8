"""Bundled furniture preset data."""
