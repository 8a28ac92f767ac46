"""Core data models shared across compscan components."""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Tuple


@dataclass(frozen=True)
class FileFinding:
    """Component names detected in a single source file."""

    path: str
    names: Tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.names:
            raise ValueError(f"FileFinding for {self.path} requires at least one name")


@dataclass(frozen=True)
class Report:
    """Aggregate result of one scan invocation.

    Totals are derived from ``findings`` so they cannot drift from it.
    """

    findings: Tuple[FileFinding, ...]
    elapsed_ms: int

    @classmethod
    def from_findings(cls, findings: Iterable[FileFinding], elapsed_ms: int) -> "Report":
        return cls(findings=tuple(findings), elapsed_ms=elapsed_ms)

    @property
    def total_components(self) -> int:
        return sum(len(finding.names) for finding in self.findings)

    @property
    def files_with_components(self) -> int:
        return len(self.findings)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_components": self.total_components,
            "files_with_components": self.files_with_components,
            "elapsed_ms": self.elapsed_ms,
            "findings": [
                {"path": finding.path, "names": list(finding.names)}
                for finding in self.findings
            ],
        }
