"""CLI utilities."""
