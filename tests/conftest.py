"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass

from objext import BindingList, ObservableCollection, get_plan_cache


@dataclass(slots=True)
class FixturePerson:
    name: str
    age: int
    tags: ObservableCollection[str] | None = None


@dataclass
class FixtureRoster:
    title: str
    members: BindingList[str] | None = None
    history: list[str] | None = None


@pytest.fixture
def person_cls():
    return FixturePerson


@pytest.fixture
def roster_cls():
    return FixtureRoster


@pytest.fixture
def plan_cache():
    """Global plan cache, emptied before and after the test."""
    cache = get_plan_cache()
    cache.clear()
    yield cache
    cache.clear()
