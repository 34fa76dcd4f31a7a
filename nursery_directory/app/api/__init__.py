"""
API package containing the public read-only routes.

``router.py`` exposes a top-level ``router`` which includes every
collection router under its own prefix.
"""
