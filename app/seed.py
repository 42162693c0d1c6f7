"""
🌱 Seed de datos de prueba

Uso:
    python -m app.seed

Crea la temporada 2026, dos workouts OPEN/MEN (TIME y REPS), 40 atletas
benchmark con resultados espaciados uniformemente y un usuario de prueba.
Se puede ejecutar varias veces (todo son upserts).
"""

import asyncio
import logging
import math

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.database import Database, create_indexes
from app.repositories.benchmark_repository import BenchmarkRepository
from app.repositories.user_repository import UserRepository
from app.repositories.workout_repository import WorkoutRepository
from app.models.score import Score, ScoreType
from app.models.workout import CompetitionType, DivisionType

logger = logging.getLogger(__name__)

SEED_YEAR = 2026
BENCHMARK_SIZE = 40


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def benchmark_time_for_rank(rank: int) -> int:
    """Rank 1 => 600s, rank 40 => 1000s"""
    return 600 + _round_half_up((rank - 1) / (BENCHMARK_SIZE - 1) * 400)


def benchmark_reps_for_rank(rank: int) -> int:
    """Rank 1 => 420 reps, rank 40 => 260 reps"""
    return 420 - _round_half_up((rank - 1) / (BENCHMARK_SIZE - 1) * 160)


async def seed(db: AsyncIOMotorDatabase) -> dict:
    workout_repo = WorkoutRepository(db)
    benchmark_repo = BenchmarkRepository(db)
    user_repo = UserRepository(db)

    season = await workout_repo.upsert_season(SEED_YEAR)

    w1 = await workout_repo.upsert(
        workout_id="seed-w1",
        season_id=season.id,
        competition=CompetitionType.OPEN,
        division=DivisionType.MEN,
        name="Open 26.1 (TEST) - For time",
        description="For time: 50-40-30-20-10 reps of burpees (TEST DATA)",
        score_type=ScoreType.TIME
    )
    w2 = await workout_repo.upsert(
        workout_id="seed-w2",
        season_id=season.id,
        competition=CompetitionType.OPEN,
        division=DivisionType.MEN,
        name="Open 26.2 (TEST) - AMRAP",
        description="12-min AMRAP: 10 pull-ups, 20 box jumps, 30 air squats (TEST DATA)",
        score_type=ScoreType.REPS
    )

    for rank in range(1, BENCHMARK_SIZE + 1):
        athlete = await benchmark_repo.upsert_athlete(
            season.id, CompetitionType.OPEN, DivisionType.MEN, rank, f"Benchmark Athlete #{rank}"
        )
        await benchmark_repo.upsert_result(
            w1.id, athlete.id, Score(time_seconds=benchmark_time_for_rank(rank))
        )
        await benchmark_repo.upsert_result(
            w2.id, athlete.id, Score(reps=benchmark_reps_for_rank(rank))
        )

    user = await user_repo.upsert_by_email("test@example.com", "Test User")

    return {
        "season": {"year": season.year, "id": season.id},
        "workouts": [
            {"id": w1.id, "name": w1.name, "score_type": w1.score_type.value},
            {"id": w2.id, "name": w2.name, "score_type": w2.score_type.value},
        ],
        "user": {"id": user.id, "email": user.email},
    }


async def main():
    await Database.connect()
    try:
        db = Database.get_db()
        await create_indexes(db)
        summary = await seed(db)
        logger.info(f"🌱 Seed complete: {summary}")
    finally:
        await Database.disconnect()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
