"""Filter tables shared by the traversal and extraction engines."""

from __future__ import annotations

VALID_SUFFIXES: frozenset[str] = frozenset({".tsx", ".ts", ".jsx", ".js"})

IGNORED_DIRS: frozenset[str] = frozenset(
    {
        "node_modules",
        "dist",
        "build",
        ".git",
        ".next",
        "coverage",
        ".cache",
        "out",
        ".turbo",
        ".vercel",
    }
)

# Exact, case-sensitive matches only; "UtilHelper" is not rejected.
REJECTED_NAMES: frozenset[str] = frozenset({"Test", "Mock", "Util", "Helper", "Config"})

FRAMEWORK_INDICATORS: tuple[str, ...] = (
    "React",
    "jsx",
    "tsx",
    "return (",
    "return(",
)

DEFAULT_BATCH_SIZE = 50


__all__ = [
    "DEFAULT_BATCH_SIZE",
    "FRAMEWORK_INDICATORS",
    "IGNORED_DIRS",
    "REJECTED_NAMES",
    "VALID_SUFFIXES",
]
