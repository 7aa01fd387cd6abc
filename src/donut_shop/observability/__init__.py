"""Observability - Logging setup."""
