"""Shared test fixtures: calendar payloads, datasets and factories."""

from __future__ import annotations

import copy
from typing import Any, Callable

import pytest

from training_calendar.loader import dataset_from_dict
from training_calendar.models.dataset import CalendarDataset


def rest_week(**days: str) -> dict[str, str | None]:
    """Seven rest days, overridden by ``mon="workout-a@v1"`` style kwargs."""
    workouts: dict[str, str | None] = {
        "mon": None, "tue": None, "wed": None, "thu": None,
        "fri": None, "sat": None, "sun": None,
    }
    workouts.update(days)
    return workouts


def _variant(name: str, intensity: int = 5) -> dict[str, Any]:
    return {"name": name, "structure": [{"intensity": intensity, "durationMin": 45}]}


BASE_WORKOUTS: list[dict[str, Any]] = [
    {
        "workoutId": "workout-a",
        "version": 1,
        "status": "published",
        "tiers": {
            "MED": _variant("A MED"),
            "LRG": _variant("A LRG"),
            "XL": _variant("A XL"),
        },
    },
    {
        "workoutId": "workout-b",
        "version": 1,
        "status": "published",
        "tiers": {
            "MED": _variant("B MED", 6),
            "LRG": _variant("B LRG", 7),
        },
    },
    {
        "workoutId": "workout-draft",
        "version": 1,
        "status": "draft",
        "tiers": {
            "MED": _variant("Draft MED"),
            "LRG": _variant("Draft LRG"),
            "XL": _variant("Draft XL"),
        },
    },
]


def build_calendar_payload(**overrides: Any) -> dict[str, Any]:
    """Two-week test season 2026-01-26..2026-02-08 in America/Los_Angeles."""
    week_days = {
        "mon": "workout-a@v1",
        "tue": None,
        "wed": "workout-b@v1",
        "thu": None,
        "fri": None,
        "sat": "workout-a@v1",
        "sun": "workout-b@v1",
    }
    payload: dict[str, Any] = {
        "seasons": [
            {
                "seasonId": "season-test",
                "name": "Test Season",
                "startDate": "2026-01-26",
                "endDate": "2026-02-08",
                "timezone": "America/Los_Angeles",
                "weekIds": ["week-1", "week-2"],
            }
        ],
        "blocks": [
            {"blockId": "block-a", "name": "Block A", "intent": "Base", "weekIds": ["week-1"]},
            {"blockId": "block-b", "name": "Block B", "intent": "Build", "weekIds": ["week-2"]},
        ],
        "weeks": [
            {
                "weekId": "week-1",
                "seasonId": "season-test",
                "blockId": "block-a",
                "startDate": "2026-01-26",
                "workouts": dict(week_days),
            },
            {
                "weekId": "week-2",
                "seasonId": "season-test",
                "blockId": "block-b",
                "startDate": "2026-02-02",
                "workouts": dict(week_days),
            },
        ],
        "workouts": copy.deepcopy(BASE_WORKOUTS),
    }
    payload.update(overrides)
    return payload


def build_dst_payload() -> dict[str, Any]:
    """Two weeks straddling the 2026-03-08 US spring-forward transition."""
    return build_calendar_payload(
        seasons=[
            {
                "seasonId": "season-dst",
                "name": "DST Season",
                "startDate": "2026-03-02",
                "endDate": "2026-03-15",
                "timezone": "America/Los_Angeles",
                "weekIds": ["week-dst-1", "week-dst-2"],
            }
        ],
        blocks=[
            {
                "blockId": "block-dst",
                "name": "DST Block",
                "intent": "DST Coverage",
                "weekIds": ["week-dst-1", "week-dst-2"],
            }
        ],
        weeks=[
            {
                "weekId": "week-dst-1",
                "seasonId": "season-dst",
                "blockId": "block-dst",
                "startDate": "2026-03-02",
                "workouts": rest_week(sun="workout-a@v1"),
            },
            {
                "weekId": "week-dst-2",
                "seasonId": "season-dst",
                "blockId": "block-dst",
                "startDate": "2026-03-09",
                "workouts": rest_week(mon="workout-b@v1"),
            },
        ],
    )


@pytest.fixture
def calendar_payload() -> dict[str, Any]:
    return build_calendar_payload()


@pytest.fixture
def calendar_data(calendar_payload: dict[str, Any]) -> CalendarDataset:
    return dataset_from_dict(calendar_payload)


@pytest.fixture
def dst_data() -> CalendarDataset:
    return dataset_from_dict(build_dst_payload())


@pytest.fixture
def calendar_factory() -> Callable[..., CalendarDataset]:
    """Factory fixture: ``calendar_factory(weeks=[...])`` -> CalendarDataset."""

    def factory(**overrides: Any) -> CalendarDataset:
        return dataset_from_dict(build_calendar_payload(**overrides))

    return factory


@pytest.fixture
def week_days() -> Callable[..., dict[str, str | None]]:
    """Factory fixture: ``week_days(mon="workout-a@v1")`` -> 7-day mapping."""
    return rest_week
