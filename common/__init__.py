"""Shared helpers: logging setup, secrets file access, date formatting."""
