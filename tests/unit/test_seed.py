"""
Tests for the seed script
"""

import pytest

from app.models.workout import CompetitionType, DivisionType
from app.seed import seed, benchmark_time_for_rank, benchmark_reps_for_rank
from app.services.workout_service import WorkoutService


class TestSeed:

    def test_benchmark_curves(self):
        assert benchmark_time_for_rank(1) == 600
        assert benchmark_time_for_rank(40) == 1000
        assert benchmark_reps_for_rank(1) == 420
        assert benchmark_reps_for_rank(40) == 260
        assert benchmark_time_for_rank(15) == 744
        assert benchmark_reps_for_rank(23) == 330

    @pytest.mark.asyncio
    async def test_seed_is_idempotent(self, test_db):
        first = await seed(test_db)
        second = await seed(test_db)

        assert first == second
        assert await test_db["seasons"].count_documents({}) == 1
        assert await test_db["workouts"].count_documents({}) == 2
        assert await test_db["benchmark_athletes"].count_documents({}) == 40
        assert await test_db["benchmark_results"].count_documents({}) == 80
        assert await test_db["users"].count_documents({}) == 1

    @pytest.mark.asyncio
    async def test_seeded_workouts_are_listed(self, test_db):
        await seed(test_db)

        workouts = await WorkoutService(test_db).list_workouts(
            2026, CompetitionType.OPEN, DivisionType.MEN
        )

        assert {w.id for w in workouts} == {"seed-w1", "seed-w2"}
