"""Structural pattern rules for component-like declarations."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Tuple

_NAME = r"([A-Z][a-zA-Z0-9]*)"
_FC_ANNOTATION = r"(?::\s*(?:React\.)?(?:FC|FunctionComponent)[^=]*)?"
_WRAPPERS = r"(?:React\.memo\s*\()?\s*(?:React\.forwardRef\s*\()?"


@dataclass(frozen=True)
class PatternRule:
    """A single regex recognising one declaration shape.

    The first capture group of ``pattern`` must hold the declared name.
    """

    name: str
    pattern: re.Pattern[str]

    def finditer_names(self, text: str) -> Iterator[str]:
        for match in self.pattern.finditer(text):
            captured = match.group(1)
            if captured:
                yield captured


FUNCTION_RULE = PatternRule(
    name="function",
    pattern=re.compile(
        r"function\s+" + _NAME + r"\s*\([^)]*\)\s*"
        r"(?::\s*(?:React\.)?(?:ReactElement|ReactNode|JSX\.Element|FC|FunctionComponent)[^{]*)?\{"
    ),
)

ARROW_RULE = PatternRule(
    name="arrow",
    pattern=re.compile(
        r"(?:const|let|var)\s+" + _NAME + r"\s*" + _FC_ANNOTATION + r"\s*=\s*" + _WRAPPERS
        + r"\s*\([^)]*\)\s*(?::\s*(?:React\.)?(?:ReactElement|ReactNode|JSX\.Element)[^=]*)?\s*=>"
    ),
)

CLASS_RULE = PatternRule(
    name="class",
    pattern=re.compile(
        r"class\s+" + _NAME + r"\s+extends\s+(?:React\.)?(?:Component|PureComponent)"
    ),
)

DEFAULT_EXPORT_FUNCTION_RULE = PatternRule(
    name="default-export-function",
    pattern=re.compile(r"export\s+default\s+function\s+" + _NAME),
)

EXPORTED_ARROW_RULE = PatternRule(
    name="exported-arrow",
    pattern=re.compile(
        r"export\s+(?:const|let|var)\s+" + _NAME + r"\s*" + _FC_ANNOTATION + r"\s*=\s*"
        + _WRAPPERS + r"\s*\([^)]*\)\s*(?::\s*[^=]*)?\s*=>"
    ),
)

EXPORTED_FUNCTION_RULE = PatternRule(
    name="exported-function",
    pattern=re.compile(r"export\s+function\s+" + _NAME + r"\s*\("),
)

COMPONENT_RULES: Tuple[PatternRule, ...] = (
    FUNCTION_RULE,
    ARROW_RULE,
    CLASS_RULE,
    DEFAULT_EXPORT_FUNCTION_RULE,
    EXPORTED_ARROW_RULE,
    EXPORTED_FUNCTION_RULE,
)


__all__ = [
    "ARROW_RULE",
    "CLASS_RULE",
    "COMPONENT_RULES",
    "DEFAULT_EXPORT_FUNCTION_RULE",
    "EXPORTED_ARROW_RULE",
    "EXPORTED_FUNCTION_RULE",
    "FUNCTION_RULE",
    "PatternRule",
]
