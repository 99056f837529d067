"""Utility helpers."""

from .urls import join_paths, clean_uri

__all__ = ["join_paths", "clean_uri"]
