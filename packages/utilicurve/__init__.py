"""utilicurve - parameterized response curves for utility scoring."""

__version__ = "0.1.0"
