from .score import Score, ScoreType, RankResult
from .workout import Season, Workout, CompetitionType, DivisionType
from .benchmark import BenchmarkAthlete, BenchmarkResult, BenchmarkEntry
from .user import User
from .result import UserResult, LogResultCreate
from .leaderboard import WorkoutPoints, SeasonSummary, WorkoutComparison, LeaderboardEntry

__all__ = [
    "Score",
    "ScoreType",
    "RankResult",
    "Season",
    "Workout",
    "CompetitionType",
    "DivisionType",
    "BenchmarkAthlete",
    "BenchmarkResult",
    "BenchmarkEntry",
    "User",
    "UserResult",
    "LogResultCreate",
    "WorkoutPoints",
    "SeasonSummary",
    "WorkoutComparison",
    "LeaderboardEntry",
]
