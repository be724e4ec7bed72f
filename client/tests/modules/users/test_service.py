"""Tests for the user service."""

import pytest

from modules.users.exceptions import UserApiError
from modules.users.interfaces import IUserService
from modules.users.models import PatientProfile, UpdateUserInfoRequest
from modules.users.service import UserService


class TestUserService:
    @pytest.fixture
    def service(self, api):
        return UserService(api)

    def test_implements_interface(self, service):
        assert isinstance(service, IUserService)

    @pytest.mark.asyncio
    async def test_get_user_info(self, service, backend):
        """Should return the data exactly as sent."""
        info = {"userId": 1, "nickname": "walker", "role": "PATIENT"}
        backend.reply("GET", "/api/user/info", info)
        assert await service.get_user_info() == info

    @pytest.mark.asyncio
    async def test_get_user_info_error_uses_fixed_message(self, service, backend):
        """The server's message should not leak into the error message."""
        backend.fail("GET", "/api/user/info", "사용자를 찾을 수 없습니다")

        with pytest.raises(UserApiError) as exc_info:
            await service.get_user_info()

        assert str(exc_info.value) == "Failed to get user info"
        assert exc_info.value.server_message == "사용자를 찾을 수 없습니다"

    @pytest.mark.asyncio
    async def test_get_user_profile_status(self, service, backend):
        backend.reply("GET", "/api/user/profile-status", {"profileCompleted": False})
        assert await service.get_user_profile_status() == {"profileCompleted": False}

    @pytest.mark.asyncio
    async def test_set_patient_profile(self, service, backend):
        """Should POST the profile in camelCase."""
        backend.reply("POST", "/api/user/patient-profile", {"saved": True})

        await service.set_patient_profile(
            PatientProfile(
                age=72,
                disease="knee arthritis",
                phone_number="010-1234-5678",
                emergency_contact="010-8765-4321",
            )
        )

        assert backend.last_json() == {
            "age": 72,
            "disease": "knee arthritis",
            "phoneNumber": "010-1234-5678",
            "emergencyContact": "010-8765-4321",
        }

    @pytest.mark.asyncio
    async def test_set_patient_profile_error(self, service, backend):
        backend.fail("POST", "/api/user/patient-profile")
        with pytest.raises(UserApiError, match="Failed to set patient profile"):
            await service.set_patient_profile(
                {"age": 70, "disease": "x", "phoneNumber": "1", "emergencyContact": "2"}
            )

    @pytest.mark.asyncio
    async def test_update_user_info_sends_only_set_fields(self, service, backend):
        backend.reply("PUT", "/api/user/info", {"nickname": "new"})

        await service.update_user_info(UpdateUserInfoRequest(nickname="new"))

        assert backend.last_request.method == "PUT"
        assert backend.last_json() == {"nickname": "new"}

    @pytest.mark.asyncio
    async def test_update_patient_info(self, service, backend):
        backend.reply("PUT", "/api/user/patient-info", {"age": 73})

        result = await service.update_patient_info({"age": 73})

        assert result == {"age": 73}
        assert backend.last_json() == {"age": 73}

    @pytest.mark.asyncio
    async def test_update_patient_info_error(self, service, backend):
        backend.fail("PUT", "/api/user/patient-info")
        with pytest.raises(UserApiError, match="Failed to update patient info"):
            await service.update_patient_info({"age": 73})

    @pytest.mark.asyncio
    async def test_generate_patient_link_code(self, service, backend):
        """Should POST with no body."""
        backend.reply("POST", "/api/user/patient/link-code", {"linkCode": "ABC123"})

        assert await service.generate_patient_link_code() == {"linkCode": "ABC123"}
        assert backend.last_request.content == b""

    @pytest.mark.asyncio
    async def test_delete_user(self, service, backend):
        backend.reply("DELETE", "/api/user", "deleted")
        assert await service.delete_user() == "deleted"

    @pytest.mark.asyncio
    async def test_delete_user_without_data_fails(self, service, backend):
        backend.reply("DELETE", "/api/user", None)
        with pytest.raises(UserApiError, match="Failed to delete user"):
            await service.delete_user()
