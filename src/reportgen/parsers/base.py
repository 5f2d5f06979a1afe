"""Parser interface: the source of the unfiltered coverage model."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from ..models import Assembly


class Parser(ABC):
    """Supplies assemblies and an identity string shown in the summary."""

    @property
    @abstractmethod
    def assemblies(self) -> Sequence[Assembly]:
        """Parsed assemblies in discovery order."""

    @abstractmethod
    def __str__(self) -> str:
        """Human-readable identity of the parser (provenance)."""


class StaticParser(Parser):
    """Serves an already-built model; used when embedding the pipeline."""

    def __init__(self, assemblies: Sequence[Assembly], name: str = "StaticParser"):
        self._assemblies: List[Assembly] = list(assemblies)
        self.name = name

    @property
    def assemblies(self) -> Sequence[Assembly]:
        return self._assemblies

    def __str__(self) -> str:
        return self.name
