"""YAML parser for course catalogues."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from .exceptions import MissingReferenceError, ParseError, ValidationError
from .graph import TaskGraph
from .models import Catalog, CatalogMetadata
from .schemas import CatalogSchema


class CatalogParser:
    """Parser for course catalogue YAML files.

    Builds the TaskGraph and wires prerequisite edges. Cycle checking is left
    to load_catalog() in termplan.loader.
    """

    def parse_file(self, file_path: Path | str) -> Catalog:
        """Parse a YAML file into a Catalog."""
        path = Path(file_path)
        if not path.exists():
            raise ParseError(f"File not found: {file_path}")

        try:
            with path.open(encoding="utf-8") as f:
                data: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ParseError(f"Failed to parse YAML: {e}") from e

        if not isinstance(data, dict):
            raise ParseError("YAML must contain a dictionary at the root level")

        return self.parse_data(data)  # type: ignore[arg-type]

    def parse_data(self, data: dict[str, Any]) -> Catalog:
        """Build a Catalog from already-loaded YAML data."""
        try:
            schema = CatalogSchema.model_validate(data)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid catalogue structure: {e}") from e

        metadata = CatalogMetadata(
            title=schema.metadata.title,
            program=schema.metadata.program,
            version=schema.metadata.version,
        )

        # Insert every course first so requires can point forward
        graph = TaskGraph()
        completed: set[int] = set()
        for course_id, course in schema.courses.items():
            task = graph.insert_task(
                course.name or course_id, course.credits, course.hours, key=course_id
            )
            if course.completed:
                completed.add(task.index)

        for task, (course_id, course) in zip(graph.all_tasks(), schema.courses.items()):
            for prereq_id in course.requires:
                prereq = graph.find(prereq_id)
                if prereq is None:
                    raise MissingReferenceError(
                        f"Course {course_id} requires unknown course: {prereq_id}"
                    )
                graph.add_prerequisite(task, prereq)

        return Catalog(metadata=metadata, graph=graph, completed=completed)
