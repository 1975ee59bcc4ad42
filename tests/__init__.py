"""Test suite for utilicurve.

Test Structure:
- unit/curves/: shapes, formulas, evaluation laws, text encoding, sampling
- unit/utils/: logging and math helpers
- unit/config/: configuration loading
- unit/cli/: command-line interface
"""
