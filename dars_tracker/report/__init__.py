# report/__init__.py
"""
DARS report extraction and rendering.
"""

# Import for easier access
from .extractor import (
    extract_credits,
    extract_general_requirements,
    extract_gpa,
    extract_sub_requirements,
    extract_verbose_sections,
    parse_report,
)

__all__ = [
    "extract_credits",
    "extract_gpa",
    "extract_general_requirements",
    "extract_sub_requirements",
    "extract_verbose_sections",
    "parse_report",
]
