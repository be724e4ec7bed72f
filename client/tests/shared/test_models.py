"""Tests for shared/models.py."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from modules.auth.models import OAuthCallbackRequest
from modules.exercise.models import ExerciseHistoryParams
from modules.health.models import PainHistoryParams
from modules.users.models import UpdatePatientInfoRequest
from shared.models import Envelope, EnvelopeStatus


class TestEnvelope:
    def test_success_with_data(self):
        envelope = Envelope(status="SUCCESS", data={"a": 1})
        assert envelope.is_success is True
        assert envelope.has_data is True

    def test_error_status(self):
        envelope = Envelope(status="ERROR", message="nope")
        assert envelope.status == EnvelopeStatus.ERROR
        assert envelope.is_success is False

    @pytest.mark.parametrize("data", [None, ""])
    def test_absent_data(self, data):
        """null and the empty string should count as no data."""
        assert Envelope(status="SUCCESS", data=data).has_data is False

    @pytest.mark.parametrize("data", [[], {}, 0, False, "text"])
    def test_present_data(self, data):
        """Empty containers and falsy scalars are still data."""
        assert Envelope(status="SUCCESS", data=data).has_data is True

    def test_extra_fields_ignored(self):
        envelope = Envelope.model_validate({"status": "SUCCESS", "timestamp": 1})
        assert envelope.data is None

    def test_status_required(self):
        with pytest.raises(PydanticValidationError):
            Envelope.model_validate({"data": {}})


class TestWireModel:
    def test_to_wire_uses_camel_case(self):
        body = UpdatePatientInfoRequest(phone_number="010", emergency_contact="011")
        assert body.to_wire() == {"phoneNumber": "010", "emergencyContact": "011"}

    def test_to_wire_drops_unset_fields(self):
        """Partial updates should only send what was set."""
        assert UpdatePatientInfoRequest(age=70).to_wire() == {"age": 70}

    def test_wire_body_accepts_camel_case_dict(self):
        body = UpdatePatientInfoRequest.wire_body({"phoneNumber": "010"})
        assert body == {"phoneNumber": "010"}

    def test_wire_body_accepts_snake_case_dict(self):
        body = UpdatePatientInfoRequest.wire_body({"phone_number": "010"})
        assert body == {"phoneNumber": "010"}

    def test_wire_body_accepts_instance(self):
        body = OAuthCallbackRequest.wire_body(OAuthCallbackRequest(provider="kakao", code="c"))
        assert body == {"provider": "kakao", "code": "c"}

    def test_unknown_fields_rejected(self):
        """Typos in a request body should fail before sending."""
        with pytest.raises(PydanticValidationError):
            UpdatePatientInfoRequest.wire_body({"phoneNumbr": "010"})


class TestQueryModel:
    def test_blank_filters_become_none(self):
        params = PainHistoryParams.model_validate({"startDate": "", "endDate": ""})
        assert params.start_date is None
        assert params.end_date is None
        assert params.to_wire() == {}

    def test_blank_enum_filter_is_dropped(self):
        params = ExerciseHistoryParams.model_validate({"exerciseType": "", "startDate": "2024-01-01"})
        assert params.to_wire() == {"startDate": "2024-01-01"}

    def test_bad_date_still_rejected(self):
        with pytest.raises(PydanticValidationError):
            PainHistoryParams.model_validate({"startDate": "not-a-date"})
