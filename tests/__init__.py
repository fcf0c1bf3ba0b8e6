"""Test suite for taperkit.

Test Structure:
- unit/numeric/: ranges, mapping, taper curve and rounding
- unit/curves/: TaperCurve model and sampling
- unit/config/: config models and loader
- unit/utils/: logging utilities
- unit/cli/: command-line interface
- conftest.py: Shared fixtures and test configuration
"""
