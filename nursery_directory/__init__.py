"""
Top‑level package for the Nursery Directory API.

All functionality lives in ``app``; this package provides no public
exports of its own.
"""

__all__ = []
