# src/iad/__init__.py
"""Editing tools for pipe-delimited and tag-prefixed submission documents."""

__version__ = "0.1.0"
