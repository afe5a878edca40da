"""Shared helpers for settings and date formatting."""
