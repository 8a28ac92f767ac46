"""Heuristic React component counter for source trees."""

from .models import FileFinding, Report
from .pipeline import ComponentScanner, scan

__all__ = ["ComponentScanner", "FileFinding", "Report", "scan"]
