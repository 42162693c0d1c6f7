"""
Scoring engine - validation, comparison, ranking and points.

Pure functions, no database access. Everything that needs persistence
(PointsService, LeaderboardService, ResultService) loads the data and
calls into this module.

Points scale:
- Rank 1 against the Top 40: 40 points
- Rank 40: 1 point
- Rank 41 or worse (or an invalid rank): 0 points
"""

import math
from functools import cmp_to_key
from typing import Iterable, Mapping, Optional, Sequence, Union

from app.models.score import Score, ScoreType, RankResult
from app.models.leaderboard import SeasonSummary, WorkoutPoints


MAX_RANKED_POSITION = 40

# A TIME_REPS score without a time loses every tie on reps
MISSING_TIME_SENTINEL = math.inf

REQUIRED_FIELDS = {
    ScoreType.TIME: "time_seconds",
    ScoreType.REPS: "reps",
    ScoreType.LOAD: "load_kg",
    ScoreType.TIME_REPS: "reps",
}


class ScoringError(Exception):
    """Base exception for scoring errors."""
    pass


class IncompleteScoreError(ScoringError):
    """Raised when a score lacks the field its score type requires."""

    def __init__(self, score_type: ScoreType, missing_field: str, workout_id: Optional[str] = None):
        self.score_type = score_type
        self.missing_field = missing_field
        self.workout_id = workout_id

        message = f"{score_type.value} requires {missing_field}"
        if workout_id:
            message = f"Workout {workout_id}: {message}"
        super().__init__(message)


class InvalidScoreTypeError(ScoringError):
    """Raised for a score type outside TIME, REPS, LOAD, TIME_REPS."""
    pass


def coerce_score_type(score_type: Union[ScoreType, str]) -> ScoreType:
    """Turn a raw value into a ScoreType, failing fast on anything else."""
    if isinstance(score_type, ScoreType):
        return score_type
    try:
        return ScoreType(score_type)
    except ValueError:
        raise InvalidScoreTypeError(f"Unknown score type: {score_type!r}")


def validate_score(score_type: Union[ScoreType, str], score: Score) -> None:
    """
    Check that a score carries the field its score type needs.

    Only the write path calls this. TIME_REPS requires reps only; the
    time is optional and only used to break ties.

    Raises: IncompleteScoreError
    """
    score_type = coerce_score_type(score_type)
    field = REQUIRED_FIELDS[score_type]

    if getattr(score, field) is None:
        raise IncompleteScoreError(score_type, field)


def _require(score_type: ScoreType, score: Score, field: str):
    value = getattr(score, field)
    if value is None:
        raise IncompleteScoreError(score_type, field)
    return value


def _sign(x, y) -> int:
    return (x > y) - (x < y)


def compare_scores(score_type: Union[ScoreType, str], a: Score, b: Score) -> int:
    """
    Compare two scores of the same score type.

    Returns:
        negative if `a` ranks better, 0 on a tie, positive if `b` ranks better
    """
    score_type = coerce_score_type(score_type)

    if score_type is ScoreType.TIME:
        return _sign(
            _require(score_type, a, "time_seconds"),
            _require(score_type, b, "time_seconds"),
        )

    if score_type is ScoreType.REPS:
        return _sign(_require(score_type, b, "reps"), _require(score_type, a, "reps"))

    if score_type is ScoreType.LOAD:
        return _sign(_require(score_type, b, "load_kg"), _require(score_type, a, "load_kg"))

    if score_type is ScoreType.TIME_REPS:
        reps_diff = _sign(_require(score_type, b, "reps"), _require(score_type, a, "reps"))
        if reps_diff != 0:
            return reps_diff

        time_a = a.time_seconds if a.time_seconds is not None else MISSING_TIME_SENTINEL
        time_b = b.time_seconds if b.time_seconds is not None else MISSING_TIME_SENTINEL
        return _sign(time_a, time_b)

    raise InvalidScoreTypeError(f"Unknown score type: {score_type!r}")


def sort_scores(score_type: Union[ScoreType, str], scores: Iterable[Score]) -> list:
    """Stable sort, best score first."""
    score_type = coerce_score_type(score_type)
    return sorted(scores, key=cmp_to_key(lambda x, y: compare_scores(score_type, x, y)))


def compute_beaten_count(
    score_type: Union[ScoreType, str],
    user_score: Score,
    benchmark_scores: Sequence[Score]
) -> int:
    """Number of benchmark scores the user strictly beats. Ties don't count."""
    score_type = coerce_score_type(score_type)

    beaten = 0
    for benchmark_score in benchmark_scores:
        if compare_scores(score_type, user_score, benchmark_score) < 0:
            beaten += 1
    return beaten


def compute_merged_rank(
    score_type: Union[ScoreType, str],
    user_score: Score,
    benchmark_scores: Sequence[Score]
) -> int:
    """
    1-based position of the user after merging with the benchmark.

    The user's entry goes last before a stable sort, so a user tied with
    benchmark athletes is placed behind them. The entry is found by its
    origin tag, not by comparing values.

    A tie therefore costs one point per tied athlete: 330 reps against a
    REPS benchmark where rank 23 also has 330 gives rank 24 (17 points),
    not 23 (18 points).

    Returns a value in [1, N + 1].
    """
    score_type = coerce_score_type(score_type)

    merged = [(False, s) for s in benchmark_scores]
    merged.append((True, user_score))
    merged.sort(key=cmp_to_key(lambda x, y: compare_scores(score_type, x[1], y[1])))

    for position, (is_user, _) in enumerate(merged, start=1):
        if is_user:
            return position

    return len(merged)


def points_from_rank(rank: int) -> int:
    """41 - rank inside [1, 40], otherwise 0."""
    if rank < 1 or rank > MAX_RANKED_POSITION:
        return 0
    return MAX_RANKED_POSITION + 1 - rank


def score_against_benchmark(
    score_type: Union[ScoreType, str],
    user_score: Score,
    benchmark_scores: Sequence[Score]
) -> RankResult:
    """Beaten count, merged rank and points in one go."""
    rank = compute_merged_rank(score_type, user_score, benchmark_scores)

    return RankResult(
        beaten_count=compute_beaten_count(score_type, user_score, benchmark_scores),
        rank=rank,
        points=points_from_rank(rank),
    )


def summarize_season(
    workouts: Iterable[tuple[str, Union[ScoreType, str]]],
    user_scores_by_workout: Mapping[str, Score],
    benchmark_by_workout: Mapping[str, Sequence[Score]],
) -> SeasonSummary:
    """
    Aggregate points across the workouts of a season scope.

    Args:
        workouts: (workout_id, score_type) pairs in display order
        user_scores_by_workout: the user's score per attempted workout
        benchmark_by_workout: benchmark scores per workout

    Workouts the user never logged are skipped, they are not zero-point
    entries. A logged workout without benchmark data ranks 1 (40 points).

    Raises: IncompleteScoreError carrying the workout_id of the workout
            whose stored scores lack the required field
    """
    per_workout: list[WorkoutPoints] = []
    total_points = 0

    for workout_id, score_type in workouts:
        user_score: Optional[Score] = user_scores_by_workout.get(workout_id)
        if user_score is None:
            continue

        benchmark = benchmark_by_workout.get(workout_id) or []
        try:
            result = score_against_benchmark(score_type, user_score, benchmark)
        except IncompleteScoreError as e:
            raise IncompleteScoreError(e.score_type, e.missing_field, workout_id) from e

        total_points += result.points
        per_workout.append(WorkoutPoints(
            workout_id=workout_id,
            points=result.points,
            beaten_count=result.beaten_count,
            rank=result.rank,
        ))

    return SeasonSummary(
        total_points=total_points,
        completed_workouts=len(per_workout),
        per_workout=per_workout,
    )
