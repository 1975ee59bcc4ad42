"""Command-line interface for utilicurve."""
