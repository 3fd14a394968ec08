"""Utilities for the OpenClaw setup tool."""

from .path_finder import PathFinder

__all__ = [
    'PathFinder'
]
