"""Heuristic extraction of React component names from raw source text."""

from __future__ import annotations

import re
from typing import Iterable, Set

from .base import Analyzer
from .rules import COMPONENT_RULES, PatternRule
from ..constants import FRAMEWORK_INDICATORS, REJECTED_NAMES

_RETURNS_MARKUP = re.compile(r"return\s*<")


def has_component_markers(text: str) -> bool:
    """Cheap pre-check: framework indicator substrings or a markup return."""
    if any(indicator in text for indicator in FRAMEWORK_INDICATORS):
        return True
    return _RETURNS_MARKUP.search(text) is not None


def is_accepted_name(name: str) -> bool:
    return len(name) > 1 and name not in REJECTED_NAMES


def match_declarations(
    text: str, rules: Iterable[PatternRule] = COMPONENT_RULES
) -> Set[str]:
    """Apply every rule to ``text`` and return the accepted names."""
    names: Set[str] = set()
    for rule in rules:
        for name in rule.finditer_names(text):
            if is_accepted_name(name):
                names.add(name)
    return names


def extract_components(text: str) -> Set[str]:
    """Return component names declared in ``text``; empty when none are found."""
    if not has_component_markers(text):
        return set()
    return match_declarations(text)


class ComponentAnalyzer(Analyzer):
    """Finds function, arrow, class and exported component declarations."""

    def __init__(self, rules: Iterable[PatternRule] = COMPONENT_RULES) -> None:
        self.rules = tuple(rules)

    def supports(self, text: str) -> bool:
        return has_component_markers(text)

    def analyze(self, text: str) -> Set[str]:
        if not self.supports(text):
            return set()
        return match_declarations(text, self.rules)
