from __future__ import annotations
from typing import Iterable, Tuple


class EngineError(Exception):
    """Base class for evaluation engine failures."""


class DomainError(EngineError, ValueError):
    """Numeric or categorical input for which a formula is undefined."""


class IncompleteScore(EngineError):
    """A final recommendation was requested before every dimension was scored."""

    def __init__(self, missing: Iterable[str]):
        self.missing: Tuple[str, ...] = tuple(missing)
        super().__init__(f"dimensions not scored: {', '.join(self.missing)}")
