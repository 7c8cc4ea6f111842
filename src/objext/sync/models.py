"""Copy plan models.

A plan is the compiled, reusable copy procedure for one type and one
exclusion set. Plans are immutable and safe to share between threads.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

Step = Callable[[Any, Any], None]
"""Copies or merges one member: ``step(target, source)``."""


@dataclass(frozen=True, slots=True)
class PlanKey:
    """Cache key of a plan within one type.

    ``excluded`` is the canonical form of the exclusion set: names sorted and
    joined with ``|``. Empty string means nothing is excluded.
    """

    excluded: str = ""
    merge_collections: bool = False


@dataclass(frozen=True, slots=True)
class CopyPlan:
    """Per-member copy procedure bound to a type and exclusion set."""

    cls: type
    excluded: frozenset[str] = frozenset()
    merge_collections: bool = False
    members: tuple[str, ...] = ()
    steps: tuple[Step, ...] = field(default=(), repr=False, compare=False)

    def __call__(self, target: Any, source: Any) -> None:
        """Apply the plan, writing source members onto target."""
        for step in self.steps:
            step(target, source)

    @property
    def is_noop(self) -> bool:
        return not self.steps
