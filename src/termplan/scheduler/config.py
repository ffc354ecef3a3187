"""Configuration classes for semester balancing."""

from enum import Enum

from pydantic import BaseModel, Field


class UnsatisfiableMode(str, Enum):
    """What to do with courses that can never be placed."""

    IGNORE = "ignore"  # Leave them out of the plan silently
    WARN = "warn"  # Leave them out, report in result.warnings and the log
    ERROR = "error"  # Raise UnsatisfiablePrerequisitesError


class BalanceConfig(BaseModel):
    """Per-semester load limits and the stranded-course policy."""

    # Stop filling a semester once it reaches this many credits
    target_credits: int = Field(default=15, ge=0)
    # Hard ceilings per semester
    max_credits: int = Field(default=18, ge=0)
    max_hours: int = Field(default=40, ge=0)

    on_unsatisfiable: UnsatisfiableMode = UnsatisfiableMode.WARN
