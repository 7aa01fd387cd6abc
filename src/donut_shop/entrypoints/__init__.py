"""Entrypoints layer - Delivery mechanisms.

This layer contains:
- CLI: The ``donut-shop`` checkout command (Typer)

Entrypoints translate external requests into use case calls
and format responses for the delivery mechanism.
"""
