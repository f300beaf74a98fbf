from __future__ import annotations

from typing import Any, Iterator, Mapping, Optional

from pymongo.collection import Collection


def winning_plan(explain: Mapping[str, Any]) -> Mapping[str, Any]:
    plan = explain.get("queryPlanner", {}).get("winningPlan", {})
    # slot-based execution wraps the classic plan tree
    return plan.get("queryPlan", plan)


def _stages(plan: Mapping[str, Any]) -> Iterator[Mapping[str, Any]]:
    yield plan
    if "inputStage" in plan:
        yield from _stages(plan["inputStage"])
    for child in plan.get("inputStages", []):
        yield from _stages(child)


def plan_index_names(plan: Mapping[str, Any]) -> list[str]:
    """Index names read by the IXSCAN stages of a plan tree."""
    return [stage["indexName"] for stage in _stages(plan) if stage.get("stage") == "IXSCAN" and "indexName" in stage]


def is_collection_scan(plan: Mapping[str, Any]) -> bool:
    return any(stage.get("stage") == "COLLSCAN" for stage in _stages(plan))


def uses_index(
    coll: Collection,
    query: Mapping[str, Any],
    sort: Optional[list[tuple[str, int]]],
    index_name: str,
) -> bool:
    cursor = coll.find(query)
    if sort:
        cursor = cursor.sort(sort)
    return index_name in plan_index_names(winning_plan(cursor.explain()))
