"""
dars_tracker - paste a DARS degree-audit report, get back a progress summary.
"""

__version__ = "1.0.0"
