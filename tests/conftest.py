"""
Pytest fixtures and configuration for all tests.
"""

import os

# Settings() needs a URI at import time of app.main; tests never connect to it
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")

import pytest
from datetime import datetime, timezone
from typing import AsyncGenerator
from mongomock_motor import AsyncMongoMockClient

from app.models.score import Score

TEST_DB_NAME = "top40_test"


@pytest.fixture(scope="function")
async def test_db() -> AsyncGenerator:
    """
    Provide a clean in-memory database for each test.

    mongomock-motor exposes the same async API as motor, so repositories
    and services run unchanged against it.
    """
    client = AsyncMongoMockClient()
    db = client[TEST_DB_NAME]

    yield db

    collection_names = await db.list_collection_names()
    for collection_name in collection_names:
        await db[collection_name].drop()


def benchmark_times() -> list[int]:
    """Rank 1..40 times, 600s to 1000s evenly spaced (seed data shape)."""
    from app.seed import benchmark_time_for_rank
    return [benchmark_time_for_rank(rank) for rank in range(1, 41)]


def benchmark_reps() -> list[int]:
    """Rank 1..40 reps, 420 to 260 evenly spaced (seed data shape)."""
    from app.seed import benchmark_reps_for_rank
    return [benchmark_reps_for_rank(rank) for rank in range(1, 41)]


@pytest.fixture
def time_benchmark() -> list[Score]:
    return [Score(time_seconds=t) for t in benchmark_times()]


@pytest.fixture
def reps_benchmark() -> list[Score]:
    return [Score(reps=r) for r in benchmark_reps()]


@pytest.fixture
def sample_season_data():
    return {"_id": "season-2026", "year": 2026}


@pytest.fixture
def sample_workouts_data():
    """Three OPEN/MEN workouts of the 2026 season, created in order."""
    return [
        {
            "_id": "w-time",
            "season_id": "season-2026",
            "competition": "OPEN",
            "division": "MEN",
            "name": "Open 26.1 - For time",
            "description": "For time",
            "score_type": "TIME",
            "created_at": datetime(2026, 2, 1, tzinfo=timezone.utc),
        },
        {
            "_id": "w-reps",
            "season_id": "season-2026",
            "competition": "OPEN",
            "division": "MEN",
            "name": "Open 26.2 - AMRAP",
            "description": "12-min AMRAP",
            "score_type": "REPS",
            "created_at": datetime(2026, 2, 8, tzinfo=timezone.utc),
        },
        {
            "_id": "w-load",
            "season_id": "season-2026",
            "competition": "OPEN",
            "division": "MEN",
            "name": "Open 26.3 - 1RM clean",
            "description": "Max load",
            "score_type": "LOAD",
            "created_at": datetime(2026, 2, 15, tzinfo=timezone.utc),
        },
    ]


@pytest.fixture
async def seeded_db(test_db, sample_season_data, sample_workouts_data):
    """
    Database with a season, three workouts and a Top 40 for the TIME and
    REPS workouts. The LOAD workout has no benchmark.
    """
    await test_db["seasons"].insert_one(sample_season_data)
    await test_db["workouts"].insert_many(sample_workouts_data)

    athletes = []
    results = []
    for rank, (time_seconds, reps) in enumerate(zip(benchmark_times(), benchmark_reps()), start=1):
        athlete_id = f"athlete-{rank}"
        athletes.append({
            "_id": athlete_id,
            "season_id": "season-2026",
            "competition": "OPEN",
            "division": "MEN",
            "rank": rank,
            "name": f"Benchmark Athlete #{rank}",
        })
        results.append({
            "_id": f"w-time:{athlete_id}",
            "workout_id": "w-time",
            "athlete_id": athlete_id,
            "time_seconds": time_seconds,
            "reps": None,
            "load_kg": None,
            "tiebreak_secs": None,
        })
        results.append({
            "_id": f"w-reps:{athlete_id}",
            "workout_id": "w-reps",
            "athlete_id": athlete_id,
            "time_seconds": None,
            "reps": reps,
            "load_kg": None,
            "tiebreak_secs": None,
        })

    await test_db["benchmark_athletes"].insert_many(athletes)
    await test_db["benchmark_results"].insert_many(results)

    return test_db


@pytest.fixture
def sample_user_data():
    """Sample user data for testing."""
    return {
        "_id": "user-1",
        "email": "test@example.com",
        "name": "Test User",
        "created_at": datetime(2026, 1, 1, tzinfo=timezone.utc),
    }
