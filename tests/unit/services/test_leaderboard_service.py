"""
Unit tests for LeaderboardService
"""

import pytest

from app.models.score import Score
from app.repositories.result_repository import ResultRepository
from app.services.leaderboard_service import LeaderboardService, clamp_limit
from app.services.workout_service import WorkoutNotFoundError


class TestLeaderboardService:

    @pytest.mark.asyncio
    async def test_workout_leaderboard_sorted_by_score_type(self, seeded_db):
        await seeded_db["users"].insert_many([
            {"_id": "u1", "email": "one@example.com", "name": "one"},
            {"_id": "u2", "email": "two@example.com", "name": "two"},
            {"_id": "u3", "email": "three@example.com", "name": "three"},
        ])
        repo = ResultRepository(seeded_db)
        await repo.upsert("u1", "w-time", Score(time_seconds=900))
        await repo.upsert("u2", "w-time", Score(time_seconds=610))
        await repo.upsert("u3", "w-time", Score(time_seconds=750))

        service = LeaderboardService(seeded_db)
        workout, entries = await service.get_workout_leaderboard("w-time", limit=50)

        assert workout.id == "w-time"
        assert [e.user_id for e in entries] == ["u2", "u3", "u1"]
        assert [e.rank for e in entries] == [1, 2, 3]
        assert entries[0].username == "two"
        assert entries[0].score.time_seconds == 610

    @pytest.mark.asyncio
    async def test_workout_leaderboard_limit(self, seeded_db):
        repo = ResultRepository(seeded_db)
        for i in range(5):
            await repo.upsert(f"u{i}", "w-reps", Score(reps=100 + i))

        service = LeaderboardService(seeded_db)
        _, entries = await service.get_workout_leaderboard("w-reps", limit=2)

        assert [e.user_id for e in entries] == ["u4", "u3"]
        # Users without a record still show up, just without a name
        assert entries[0].username is None

    @pytest.mark.asyncio
    async def test_unknown_workout(self, seeded_db):
        service = LeaderboardService(seeded_db)

        with pytest.raises(WorkoutNotFoundError):
            await service.get_workout_leaderboard("missing")

        with pytest.raises(WorkoutNotFoundError):
            await service.get_benchmark("missing")

    @pytest.mark.asyncio
    async def test_benchmark_sorted_by_rank(self, seeded_db):
        service = LeaderboardService(seeded_db)
        workout, entries = await service.get_benchmark("w-reps")

        assert workout.id == "w-reps"
        assert len(entries) == 40
        assert [e.rank for e in entries] == list(range(1, 41))
        assert entries[0].score.reps == 420
        assert entries[-1].score.reps == 260
        assert entries[0].name == "Benchmark Athlete #1"

    def test_clamp_limit(self):
        assert clamp_limit(0) == 1
        assert clamp_limit(-10) == 1
        assert clamp_limit(50) == 50
        assert clamp_limit(10_000) == 200
