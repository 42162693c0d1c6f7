from .user_repository import UserRepository
from .workout_repository import WorkoutRepository
from .benchmark_repository import BenchmarkRepository
from .result_repository import ResultRepository

__all__ = [
    "UserRepository",
    "WorkoutRepository",
    "BenchmarkRepository",
    "ResultRepository",
]
