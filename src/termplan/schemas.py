"""Pydantic schemas for course catalogue YAML."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator


class CourseSchema(BaseModel):
    """Schema for one course entry."""

    name: str | None = None  # Defaults to the course id
    credits: int = Field(ge=0)
    hours: int = Field(ge=0)
    requires: list[str] = Field(default_factory=list)
    completed: bool = False

    @field_validator("requires", mode="before")
    @classmethod
    def ensure_list(cls, v: Any) -> list[str]:
        """Accept a single id or a list of ids."""
        if v is None:
            return []
        if isinstance(v, list):
            return [str(item) for item in v]  # type: ignore[misc]
        return [str(v)]


class MetadataSchema(BaseModel):
    """Schema for the catalogue metadata block."""

    title: str | None = None
    program: str | None = None
    version: str = "1.0"

    @field_validator("version", mode="before")
    @classmethod
    def coerce_version_to_string(cls, v: Any) -> str:
        return str(v)


class CatalogSchema(BaseModel):
    """Schema for a whole catalogue file."""

    metadata: MetadataSchema = Field(default_factory=MetadataSchema)
    courses: dict[str, CourseSchema] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def stringify_course_ids(cls, data: Any) -> Any:
        """Course ids such as ``101:`` load from YAML as ints.

        ``101`` and ``"101"`` in the same file would collapse into one entry,
        so that case is rejected.
        """
        if isinstance(data, dict) and isinstance(data.get("courses"), dict):
            courses: dict[Any, Any] = data["courses"]  # type: ignore[assignment]
            stringified: dict[str, Any] = {}
            for k, v in courses.items():
                key = str(k)
                if key in stringified:
                    raise ValueError(f"Duplicate course id: {key}")
                stringified[key] = v
            data = {**data, "courses": stringified}
        return data  # type: ignore[return-value]
