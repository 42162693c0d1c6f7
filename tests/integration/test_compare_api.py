"""
Integration tests for /compare, /summary, /leaderboard and /benchmark
"""

import pytest


async def log(client, **body):
    response = await client.post("/results", json={"email": "athlete@example.com", **body})
    assert response.status_code == 200
    return response.json()


class TestCompareEndpoints:

    @pytest.mark.asyncio
    async def test_compare_workout(self, client):
        await log(client, workout_id="w-time", time_seconds=750)

        response = await client.get("/compare/workout/w-time", params={"email": "athlete@example.com"})

        assert response.status_code == 200
        data = response.json()
        assert data["benchmark_total"] == 40
        assert data["beaten_count"] == 25
        assert data["rank"] == 16
        assert data["points"] == 25

    @pytest.mark.asyncio
    async def test_compare_by_user_id(self, client):
        logged = await log(client, workout_id="w-reps", reps=330)
        user_id = logged["user"]["id"]

        response = await client.get("/compare/workout/w-reps", params={"user_id": user_id})

        assert response.status_code == 200
        assert response.json()["beaten_count"] == 17

    @pytest.mark.asyncio
    async def test_compare_without_result(self, client):
        await log(client, workout_id="w-time", time_seconds=750)

        response = await client.get("/compare/workout/w-reps", params={"email": "athlete@example.com"})

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_compare_missing_identifier(self, client):
        response = await client.get("/compare/workout/w-time")

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_summary_skips_unattempted(self, client):
        await log(client, workout_id="w-time", time_seconds=750)

        response = await client.get("/summary", params={
            "email": "athlete@example.com",
            "season": 2026,
            "competition": "OPEN",
            "division": "MEN",
        })

        assert response.status_code == 200
        data = response.json()
        assert data["season"] == 2026
        assert data["completed_workouts"] == 1
        assert len(data["per_workout"]) == 1
        assert data["total_points"] == 25

    @pytest.mark.asyncio
    async def test_summary_unknown_user(self, client):
        response = await client.get("/summary", params={
            "email": "nobody@example.com",
            "season": 2026,
            "competition": "OPEN",
            "division": "MEN",
        })

        assert response.status_code == 404


class TestLeaderboardEndpoints:

    @pytest.mark.asyncio
    async def test_workout_leaderboard(self, client):
        await log(client, workout_id="w-reps", reps=300)
        await client.post("/results", json={"email": "second@example.com", "workout_id": "w-reps", "reps": 350})

        response = await client.get("/leaderboard/workout/w-reps")

        assert response.status_code == 200
        data = response.json()
        assert data["workout"]["score_type"] == "REPS"
        assert [e["email"] for e in data["leaderboard"]] == ["second@example.com", "athlete@example.com"]
        assert [e["rank"] for e in data["leaderboard"]] == [1, 2]

    @pytest.mark.asyncio
    async def test_workout_leaderboard_limit_clamped(self, client):
        await log(client, workout_id="w-reps", reps=300)

        response = await client.get("/leaderboard/workout/w-reps", params={"limit": 0})

        assert response.status_code == 200
        assert len(response.json()["leaderboard"]) == 1

    @pytest.mark.asyncio
    async def test_benchmark(self, client):
        response = await client.get("/benchmark/workout/w-time")

        assert response.status_code == 200
        benchmark = response.json()["benchmark"]
        assert len(benchmark) == 40
        assert benchmark[0]["rank"] == 1
        assert benchmark[0]["score"]["time_seconds"] == 600
        assert benchmark[-1]["score"]["time_seconds"] == 1000

    @pytest.mark.asyncio
    async def test_unknown_workout(self, client):
        assert (await client.get("/leaderboard/workout/missing")).status_code == 404
        assert (await client.get("/benchmark/workout/missing")).status_code == 404


class TestIncompleteBenchmarkData:
    """A stored benchmark row without its discipline's field is a 409, not a 500."""

    @pytest.fixture
    async def broken_time_benchmark(self, seeded_db):
        await seeded_db["benchmark_results"].insert_one({
            "_id": "w-time:athlete-41",
            "workout_id": "w-time",
            "athlete_id": "athlete-41",
            "time_seconds": None,
            "reps": 300,
            "load_kg": None,
            "tiebreak_secs": None,
        })

    @pytest.mark.asyncio
    async def test_compare_reports_workout_and_field(self, client, broken_time_benchmark):
        await log(client, workout_id="w-time", time_seconds=750)

        response = await client.get("/compare/workout/w-time", params={"email": "athlete@example.com"})

        assert response.status_code == 409
        detail = response.json()["detail"]
        assert "w-time" in detail
        assert "time_seconds" in detail

    @pytest.mark.asyncio
    async def test_summary_reports_workout_and_field(self, client, broken_time_benchmark):
        await log(client, workout_id="w-time", time_seconds=750)

        response = await client.get("/summary", params={
            "email": "athlete@example.com",
            "season": 2026,
            "competition": "OPEN",
            "division": "MEN",
        })

        assert response.status_code == 409
        detail = response.json()["detail"]
        assert "w-time" in detail
        assert "time_seconds" in detail

    @pytest.mark.asyncio
    async def test_other_workouts_still_compare(self, client, broken_time_benchmark):
        await log(client, workout_id="w-reps", reps=330)

        response = await client.get("/compare/workout/w-reps", params={"email": "athlete@example.com"})

        assert response.status_code == 200
