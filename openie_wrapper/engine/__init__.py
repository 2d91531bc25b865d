"""Extraction engine invocation and output parsing."""
from .parser import Extraction, parse_ollie_line, parse_ollie_output
from .runner import ExtractionRunner

__all__ = [
    "Extraction",
    "parse_ollie_line",
    "parse_ollie_output",
    "ExtractionRunner",
]
