"""
Application package.

The API is split into small pieces: ``core`` (configuration, logging,
document store, middleware), ``services`` (collection rules such as
visibility, offer expiry and category ordering), ``schemas`` (record
models shared with the home page client) and ``api`` (HTTP routes).
"""

from .main import app  # noqa: F401
