"""
Pydantic schema definitions for directory records.

The API passes stored documents through unchanged; these models
describe the fields the home page relies on and are used by the
client to parse responses.  Unknown fields are preserved.
"""
