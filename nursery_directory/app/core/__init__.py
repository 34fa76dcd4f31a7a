"""Configuration, logging, storage and middleware."""
