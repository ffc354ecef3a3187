"""Scheduler package - capacity-constrained semester balancing.

Main entry points:
- balance: Greedy batch packing of a TaskGraph into semesters
- WorkloadBalancer: Same, driven by a BalanceConfig

Configuration:
- BalanceConfig: Target and ceilings per semester, stranded-course policy
- UnsatisfiableMode: ignore / warn / error for courses that never fit
"""

from .balancer import WorkloadBalancer, balance
from .config import BalanceConfig, UnsatisfiableMode
from .core import Batch, ScheduleResult, StrandReason

__all__ = [
    # Core dataclasses
    "Batch",
    "ScheduleResult",
    "StrandReason",
    # Configuration
    "BalanceConfig",
    "UnsatisfiableMode",
    # Algorithm
    "WorkloadBalancer",
    "balance",
]
