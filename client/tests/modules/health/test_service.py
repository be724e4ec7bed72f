"""Tests for the health service."""

import pytest

from pydantic import ValidationError as PydanticValidationError

from modules.health.exceptions import HealthApiError
from modules.health.interfaces import IHealthService
from modules.health.models import PainHistoryParams, PainRecord
from modules.health.service import PAIN_RECORD_SAVED_MESSAGE, HealthService
from tests.conftest import TEST_BASE_URL


def make_record(**overrides) -> PainRecord:
    scores = {
        "leg_pain_score": 1,
        "knee_pain_score": 4,
        "ankle_pain_score": 0,
        "heel_pain_score": 2,
        "back_pain_score": 3,
    }
    scores.update(overrides)
    return PainRecord(**scores)


class TestPainRecord:
    def test_total_pain_score(self):
        assert make_record().total_pain_score == 10

    def test_negative_scores_rejected(self):
        with pytest.raises(PydanticValidationError):
            make_record(knee_pain_score=-1)


class TestHealthService:
    @pytest.fixture
    def service(self, api):
        return HealthService(api)

    def test_implements_interface(self, service):
        assert isinstance(service, IHealthService)

    @pytest.mark.asyncio
    async def test_record_pain_manual(self, service, backend):
        """Should POST the scores in camelCase and return the data."""
        backend.reply("POST", "/api/health/pain/record", {"recordId": "r1"})

        result = await service.record_pain_manual(make_record(notes="계단에서 아픔"))

        assert result == {"recordId": "r1"}
        assert backend.last_json() == {
            "legPainScore": 1,
            "kneePainScore": 4,
            "anklePainScore": 0,
            "heelPainScore": 2,
            "backPainScore": 3,
            "notes": "계단에서 아픔",
        }

    @pytest.mark.asyncio
    async def test_record_pain_manual_without_data(self, service, backend):
        """A success with null data should return the saved confirmation."""
        backend.reply("POST", "/api/health/pain/record", None)
        assert await service.record_pain_manual(make_record()) == PAIN_RECORD_SAVED_MESSAGE

    @pytest.mark.asyncio
    async def test_record_pain_manual_error(self, service, backend):
        backend.fail("POST", "/api/health/pain/record", "invalid score")

        with pytest.raises(HealthApiError) as exc_info:
            await service.record_pain_manual(make_record())

        assert str(exc_info.value) == "Failed to record pain"
        assert exc_info.value.server_message == "invalid score"

    @pytest.mark.asyncio
    async def test_record_pain_after_exercise(self, service, backend):
        backend.reply("POST", "/api/health/pain/record/after-exercise", {"recordId": "r2"})
        assert await service.record_pain_after_exercise(make_record()) == {"recordId": "r2"}

    @pytest.mark.asyncio
    async def test_record_pain_after_exercise_requires_data(self, service, backend):
        """Unlike the manual record, a missing payload is a failure here."""
        backend.reply("POST", "/api/health/pain/record/after-exercise", None)
        with pytest.raises(HealthApiError, match="Failed to record post-exercise pain"):
            await service.record_pain_after_exercise(make_record())

    @pytest.mark.asyncio
    async def test_get_pain_history(self, service, backend):
        history = {"painRecords": [{"recordId": "r1", "recordType": "MANUAL"}]}
        backend.reply("GET", "/api/health/pain/history", history)

        result = await service.get_pain_history(
            PainHistoryParams(start_date="2024-03-01", end_date="2024-03-31")
        )

        assert result == history
        assert str(backend.last_request.url) == (
            f"{TEST_BASE_URL}/api/health/pain/history"
            "?startDate=2024-03-01&endDate=2024-03-31"
        )

    @pytest.mark.asyncio
    async def test_get_pain_history_skips_empty_dates(self, service, backend):
        """An empty start date should be dropped from the query."""
        backend.reply("GET", "/api/health/pain/history", {"painRecords": []})

        await service.get_pain_history({"startDate": "", "endDate": "2024-03-31"})

        assert str(backend.last_request.url) == (
            f"{TEST_BASE_URL}/api/health/pain/history?endDate=2024-03-31"
        )

    @pytest.mark.asyncio
    async def test_get_pain_history_error(self, service, backend):
        backend.fail("GET", "/api/health/pain/history")
        with pytest.raises(HealthApiError, match="Failed to get pain history"):
            await service.get_pain_history()
