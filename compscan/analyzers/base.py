"""Base classes for source analyzers."""

from abc import ABC, abstractmethod
from typing import Set


class Analyzer(ABC):
    """Contract for analyzers that extract declaration names from file text."""

    @abstractmethod
    def supports(self, text: str) -> bool:
        """Return True when the text is worth running the full rule set on."""

    @abstractmethod
    def analyze(self, text: str) -> Set[str]:
        """Return the unique declaration names found in the text."""
