"""
🔌 Database Connection Setup - MongoDB

Configuración centralizada para conectar a MongoDB
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from app.core.config import get_settings

logger = logging.getLogger(__name__)


class Database:
    """Singleton para la conexión a MongoDB"""

    client: Optional[AsyncIOMotorClient] = None
    db: Optional[AsyncIOMotorDatabase] = None

    @classmethod
    async def connect(cls):
        """Conecta a MongoDB"""
        if cls.client is None:
            settings = get_settings()

            cls.client = AsyncIOMotorClient(
                settings.mongodb_uri,
                maxPoolSize=10,
                minPoolSize=2,
            )
            cls.db = cls.client[settings.mongodb_db_name]

            # Test de conexión
            await cls.client.admin.command("ping")
            logger.info(f"✅ Connected to MongoDB: {settings.mongodb_db_name}")

    @classmethod
    async def disconnect(cls):
        """Cierra la conexión"""
        if cls.client is not None:
            cls.client.close()
            cls.client = None
            cls.db = None
            logger.info("❌ Disconnected from MongoDB")

    @classmethod
    def get_db(cls) -> AsyncIOMotorDatabase:
        """Retorna la instancia de la base de datos"""
        if cls.db is None:
            raise RuntimeError("Database not connected. Call Database.connect() first.")
        return cls.db


# ============================================
# 🎯 DEPENDENCY para FastAPI
# ============================================

async def get_database() -> AsyncIOMotorDatabase:
    """
    FastAPI dependency para inyectar la DB

    Uso:
        @router.get("/workouts/{workout_id}")
        async def get_workout(workout_id: str, db: Database):
            repo = WorkoutRepository(db)
            return await repo.get_by_id(workout_id)
    """
    return Database.get_db()


# ============================================
# 🏗️ ÍNDICES (idempotente, se llama al arrancar)
# ============================================

async def create_indexes(db: AsyncIOMotorDatabase):
    """
    Crea los índices necesarios.

    Los índices únicos de user_results y benchmark_results son los que
    garantizan un solo resultado por (usuario, workout) y por (workout, atleta).
    """
    # users: el identificador normalizado es único
    await db.users.create_index("email", unique=True)

    # seasons
    await db.seasons.create_index("year", unique=True)

    # workouts
    await db.workouts.create_index([("season_id", 1), ("competition", 1), ("division", 1)])

    # benchmark
    await db.benchmark_athletes.create_index(
        [("season_id", 1), ("competition", 1), ("division", 1), ("rank", 1)],
        unique=True
    )
    await db.benchmark_results.create_index([("workout_id", 1), ("athlete_id", 1)], unique=True)
    await db.benchmark_results.create_index("workout_id")

    # user_results
    await db.user_results.create_index([("user_id", 1), ("workout_id", 1)], unique=True)
    await db.user_results.create_index("workout_id")
    await db.user_results.create_index([("user_id", 1), ("created_at", -1)])

    logger.info("✅ Indexes created successfully")
