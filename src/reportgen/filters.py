"""Inclusion filters deciding which assemblies and classes are reported.

Patterns use shell wildcards (``*`` and ``?``), match case-insensitively, and
carry an optional ``+`` (include) or ``-`` (exclude) prefix::

    >>> f = PatternFilter.from_string("+MyApp.*;-*.Tests")
    >>> f.is_assembly_included("MyApp.Core")
    True
    >>> f.is_assembly_included("MyApp.Tests")
    False
"""

import fnmatch
import re
from abc import ABC, abstractmethod
from typing import Iterable, List, Pattern

from .exceptions import InvalidFilterError


class AssemblyFilter(ABC):
    """Decides whether an assembly takes part in the report."""

    @abstractmethod
    def is_assembly_included(self, name: str) -> bool:
        """Return True if the assembly called ``name`` is reported."""


class ClassFilter(ABC):
    """Decides whether a class takes part in the report."""

    @abstractmethod
    def is_class_included(self, name: str) -> bool:
        """Return True if the class called ``name`` is reported."""


def _compile(pattern: str) -> Pattern[str]:
    return re.compile(fnmatch.translate(pattern), re.IGNORECASE)


class PatternFilter(AssemblyFilter, ClassFilter):
    """Wildcard include/exclude filter usable for assemblies and classes.

    A name is included when it matches at least one include pattern and no
    exclude pattern.  Without any include pattern everything is included.
    """

    def __init__(self, patterns: Iterable[str] = ()):
        self.patterns: List[str] = []
        self._includes: List[Pattern[str]] = []
        self._excludes: List[Pattern[str]] = []

        for raw in patterns:
            pattern = raw.strip()
            if not pattern:
                continue
            target = self._includes
            body = pattern
            if pattern[0] in "+-":
                if pattern[0] == "-":
                    target = self._excludes
                body = pattern[1:].strip()
            if not body:
                raise InvalidFilterError(raw, "pattern is empty after its +/- prefix")
            target.append(_compile(body))
            self.patterns.append(pattern)

        if not self._includes:
            self._includes.append(_compile("*"))

    @classmethod
    def from_string(cls, value: str) -> "PatternFilter":
        """Build a filter from a ``;`` or ``,`` separated pattern list."""
        return cls(re.split(r"[;,]", value or ""))

    def is_included(self, name: str) -> bool:
        if any(p.match(name) for p in self._excludes):
            return False
        return any(p.match(name) for p in self._includes)

    def is_assembly_included(self, name: str) -> bool:
        return self.is_included(name)

    def is_class_included(self, name: str) -> bool:
        return self.is_included(name)

    def __repr__(self) -> str:
        return f"PatternFilter({self.patterns!r})"
