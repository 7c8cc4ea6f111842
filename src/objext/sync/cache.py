"""Process-wide cache of compiled copy plans.

Plans are built on first request for a (type, exclusion set, merge flag)
combination and kept for the lifetime of the process. Types and exclusion
sets come from call sites, so the number of entries stays small.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from logging import getLogger

from objext.core.shape import describe_shape
from objext.sync.models import CopyPlan, PlanKey
from objext.sync.operations import build_plan, plan_key

log = getLogger(__name__)


class PlanCache:
    """Thread-safe mapping from (type, plan key) to compiled copy plans.

    Lookups of existing plans take no lock. Building and inserting a missing
    plan happens under a lock with a re-check, so concurrent callers asking
    for the same plan all receive the single cached instance.
    """

    def __init__(self) -> None:
        """Initialize empty plan cache."""
        self._plans: dict[type, dict[PlanKey, CopyPlan]] = {}
        self._lock = threading.Lock()

    def get_plan(
        self,
        cls: type,
        excluded: Iterable[str] = (),
        *,
        merge_collections: bool = False,
    ) -> CopyPlan:
        """Get the copy plan for a type, building it on first use.

        Args:
            cls: Type the plan copies.
            excluded: Member names to skip. Order and duplicates are irrelevant.
            merge_collections: Merge bindable collections in place instead of
                replacing them.

        Returns:
            Cached CopyPlan.
        """
        excluded = frozenset(excluded)
        key = plan_key(excluded, merge_collections)

        plan = self._plans.get(cls, {}).get(key)
        if plan is not None:
            return plan

        with self._lock:
            per_type = self._plans.setdefault(cls, {})
            plan = per_type.get(key)
            if plan is None:
                plan = build_plan(describe_shape(cls), excluded, merge_collections)
                per_type[key] = plan
                log.debug(
                    "Built copy plan for %s (excluded=%r, merge_collections=%s): %d member(s)",
                    cls.__qualname__,
                    key.excluded,
                    merge_collections,
                    len(plan.members),
                )
        return plan

    def count(self, cls: type | None = None) -> int:
        """Number of cached plans, for one type or overall."""
        if cls is not None:
            return len(self._plans.get(cls, {}))
        return sum(len(plans) for plans in self._plans.values())

    def clear(self) -> None:
        """Drop every cached plan."""
        with self._lock:
            self._plans.clear()


# Module-level cache instance
_cache = PlanCache()


def get_plan_cache() -> PlanCache:
    """Access the global plan cache.

    Returns:
        The process-wide PlanCache instance.
    """
    return _cache
