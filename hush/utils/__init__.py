"""Utility helpers for hush."""
