"""Property synchronization: copy member values between instances of a type.

Architecture Note:
    Plans are compiled once per (type, exclusion set) and cached process-wide
    in a PlanCache. The copy functions validate arguments, pick a plan and run
    it against the borrowed target and source.
"""

from objext.sync.cache import PlanCache, get_plan_cache
from objext.sync.copier import (
    copy_properties,
    copy_properties_excluding,
    copy_properties_excluding_selected,
    copy_properties_fast,
    copy_properties_merging_collections,
)
from objext.sync.models import CopyPlan, PlanKey, Step
from objext.sync.operations import build_plan, exclusion_key, merge_collection

__all__ = [
    # Copying
    "copy_properties",
    "copy_properties_fast",
    "copy_properties_excluding",
    "copy_properties_excluding_selected",
    "copy_properties_merging_collections",
    # Plans
    "CopyPlan",
    "PlanKey",
    "Step",
    "PlanCache",
    "get_plan_cache",
    "build_plan",
    "exclusion_key",
    "merge_collection",
]
