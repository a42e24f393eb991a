"""models.py

Dataclass representing the core domain object:

- Course: a catalog entry keyed by its course number (e.g. 'CSCI101').

Kept intentionally simple so that storage lives in hash_table.py and ordering
lives in sorting.py.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Course:
    """A course in the catalog."""

    number: str                 # unique key, e.g. 'CSCI101' (4-char department prefix + digits)
    name: str
    # Prerequisites are stored by course number only; they are not checked against the table.
    prerequisites: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any iterable (lists from the CSV loader) but store an immutable tuple.
        if not isinstance(self.prerequisites, tuple):
            object.__setattr__(self, 'prerequisites', tuple(self.prerequisites))
