"""Core curve evaluation, encoding, and supporting utilities."""
