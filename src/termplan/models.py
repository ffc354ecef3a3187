"""Data models for termplan."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .exceptions import MissingReferenceError

if TYPE_CHECKING:
    from .graph import TaskGraph


def _default_index_list() -> list[int]:
    return []


@dataclass(eq=False)
class Task:
    """A course to be placed in some semester.

    Tasks are handles owned by a TaskGraph. Edges are stored as indices into
    the owning graph, so a task never holds references to other tasks and
    equality is identity.
    """

    index: int
    name: str
    credits: int
    hours: int
    prerequisites: list[int] = field(default_factory=_default_index_list)
    dependents: list[int] = field(default_factory=_default_index_list)
    key: str | None = None  # Catalogue id, when loaded from YAML

    @property
    def label(self) -> str:
        """Catalogue key if there is one, else the display name."""
        return self.key or self.name

    def __repr__(self) -> str:
        return f"Task({self.index}, {self.name!r}, credits={self.credits}, hours={self.hours})"


@dataclass
class CatalogMetadata:
    """Metadata block of a course catalogue."""

    title: str | None = None
    program: str | None = None
    version: str = "1.0"


def _default_index_set() -> set[int]:
    return set()


@dataclass
class Catalog:
    """A loaded course catalogue: its graph plus catalogue-level data."""

    metadata: CatalogMetadata
    graph: TaskGraph
    completed: set[int] = field(default_factory=_default_index_set)

    def resolve(self, keys: list[str]) -> set[int]:
        """Map catalogue ids to task indices.

        Raises:
            MissingReferenceError: If an id is not in the catalogue
        """
        indices: set[int] = set()
        for key in keys:
            task = self.graph.find(key)
            if task is None:
                raise MissingReferenceError(f"Unknown course: {key}")
            indices.add(task.index)
        return indices
