"""Analyzer implementations for component extraction."""

from .base import Analyzer
from .components import (
    ComponentAnalyzer,
    extract_components,
    has_component_markers,
    match_declarations,
)
from .rules import COMPONENT_RULES, PatternRule

__all__ = [
    "Analyzer",
    "COMPONENT_RULES",
    "ComponentAnalyzer",
    "PatternRule",
    "extract_components",
    "has_component_markers",
    "match_declarations",
]
