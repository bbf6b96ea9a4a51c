"""Tests for onboarding, track and daily lesson endpoints."""

from datetime import date

from fastapi import status
from fastapi.testclient import TestClient

from calearner.domain.common.value_objects import LessonDate
from calearner.exceptions import LessonGenerationError
from conftest import FakeLessonGenerator, FixedClock


def _onboard_and_read(client: TestClient, track: str = "philosophy") -> dict:
    client.post("/api/v1/onboarding", json={"track": track})
    response = client.post("/api/v1/lessons/today/ad-closed")
    assert response.status_code == status.HTTP_200_OK
    return response.json()


class TestOnboarding:
    """Test suite for POST /onboarding endpoint."""

    def test_onboarding_grants_free_track_and_gates_lesson(
        self, client: TestClient, generator: FakeLessonGenerator
    ) -> None:
        response = client.post("/api/v1/onboarding", json={"track": "history"})

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["action"] == "show_ad_then_generate"
        assert data["session"]["settings"]["onboarded"] is True
        assert data["session"]["settings"]["selected_track"] == "history"
        assert data["session"]["subscription"]["free_track_id"] == "history"
        assert data["session"]["ad_pending"] is True
        assert generator.calls == []

    def test_custom_onboarding_requires_topic(self, client: TestClient) -> None:
        response = client.post("/api/v1/onboarding", json={"track": "custom"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["field"] == "custom_topic"

    def test_custom_onboarding_with_topic(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/onboarding", json={"track": "custom", "custom_topic": "Stoicism"}
        )

        assert response.status_code == status.HTTP_201_CREATED
        settings = response.json()["session"]["settings"]
        assert settings["custom_topic"] == "Stoicism"

    def test_second_onboarding_conflicts(self, client: TestClient) -> None:
        client.post("/api/v1/onboarding", json={"track": "history"})

        response = client.post("/api/v1/onboarding", json={"track": "finance"})

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["rule"] == "single_onboarding"

    def test_unknown_track_is_rejected(self, client: TestClient) -> None:
        response = client.post("/api/v1/onboarding", json={"track": "astrology"})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


class TestTodayLesson:
    """Test suite for /lessons/today endpoints."""

    def test_lesson_before_onboarding_conflicts(self, client: TestClient) -> None:
        response = client.post("/api/v1/lessons/today")

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["rule"] == "track_required"

    def test_closing_ad_generates_lesson(
        self, client: TestClient, generator: FakeLessonGenerator
    ) -> None:
        data = _onboard_and_read(client)

        lesson = data["today_lesson"]
        assert lesson["date"] == "2024-01-10"
        assert lesson["track"] == "philosophy"
        assert lesson["completed"] is False
        assert data["ad_pending"] is False
        assert len(generator.calls) == 1

    def test_repeated_requests_reuse_lesson(
        self, client: TestClient, generator: FakeLessonGenerator
    ) -> None:
        _onboard_and_read(client)

        response = client.post("/api/v1/lessons/today")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["action"] == "no_op"
        assert len(generator.calls) == 1

    def test_failed_generation_is_retried(
        self, client: TestClient, generator: FakeLessonGenerator
    ) -> None:
        client.post("/api/v1/onboarding", json={"track": "philosophy"})
        generator.error = LessonGenerationError("upstream timeout")

        failed = client.post("/api/v1/lessons/today/ad-closed").json()
        assert failed["generation_failed"] is True
        assert failed["today_lesson"] is None

        generator.error = None
        response = client.post("/api/v1/lessons/today")

        data = response.json()
        assert data["action"] == "show_ad_then_generate"
        assert data["session"]["generation_failed"] is False


class TestCompletion:
    """Test suite for POST /lessons/today/complete endpoint."""

    def test_completion_starts_streak_and_archives(self, client: TestClient) -> None:
        _onboard_and_read(client)

        response = client.post("/api/v1/lessons/today/complete")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["changed"] is True
        session = data["session"]
        assert session["today_lesson"]["completed"] is True
        assert session["progress"]["current_streak"] == 1
        assert session["progress"]["longest_streak"] == 1
        assert session["progress"]["completed_dates"] == ["2024-01-10"]
        assert session["archive_size"] == 1

    def test_completing_twice_changes_nothing(self, client: TestClient) -> None:
        _onboard_and_read(client)
        client.post("/api/v1/lessons/today/complete")

        response = client.post("/api/v1/lessons/today/complete")

        assert response.json()["changed"] is False
        assert response.json()["session"]["progress"]["current_streak"] == 1

    def test_next_day_extends_streak(self, client: TestClient, clock: FixedClock) -> None:
        _onboard_and_read(client)
        client.post("/api/v1/lessons/today/complete")

        clock.current = LessonDate(date(2024, 1, 11))
        client.post("/api/v1/lessons/today")
        client.post("/api/v1/lessons/today/ad-closed")
        response = client.post("/api/v1/lessons/today/complete")

        progress = response.json()["session"]["progress"]
        assert progress["current_streak"] == 2
        assert progress["longest_streak"] == 2
        assert progress["last_completed_date"] == "2024-01-11"


class TestArchive:
    """Test suite for /archive endpoints."""

    def test_archive_lists_completed_lessons(self, client: TestClient) -> None:
        _onboard_and_read(client)
        client.post("/api/v1/lessons/today/complete")

        response = client.get("/api/v1/archive")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["total"] == 1
        assert data["items"][0]["date"] == "2024-01-10"
        assert data["items"][0]["completed"] is True

    def test_get_archived_lesson(self, client: TestClient) -> None:
        _onboard_and_read(client)
        client.post("/api/v1/lessons/today/complete")

        response = client.get("/api/v1/archive/2024-01-10")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["track"] == "philosophy"

    def test_unknown_archive_date(self, client: TestClient) -> None:
        response = client.get("/api/v1/archive/2024-01-09")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_malformed_archive_date(self, client: TestClient) -> None:
        response = client.get("/api/v1/archive/yesterday")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["field"] == "date"
