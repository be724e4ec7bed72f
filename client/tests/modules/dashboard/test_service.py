"""Tests for the dashboard service."""

import pytest

import httpx

from modules.dashboard.exceptions import DashboardApiError
from modules.dashboard.interfaces import IDashboardService
from modules.dashboard.service import DashboardService, get_dashboard_service
from shared.exceptions import HTTPStatusError


class TestDashboardService:
    @pytest.fixture
    def service(self, api):
        return DashboardService(api)

    def test_implements_interface(self, service):
        assert isinstance(service, IDashboardService)

    def test_singleton(self):
        assert get_dashboard_service() is get_dashboard_service()

    @pytest.mark.asyncio
    async def test_get_patient_dashboard(self, service, backend):
        dashboard = {
            "todaySteps": 3200,
            "weeklySteps": [{"day": "MON", "steps": 1000}],
            "recentPain": None,
        }
        backend.reply("GET", "/api/dashboard/patient", dashboard)
        assert await service.get_patient_dashboard() == dashboard

    @pytest.mark.asyncio
    async def test_get_patient_dashboard_error(self, service, backend):
        backend.fail("GET", "/api/dashboard/patient", "no profile")
        with pytest.raises(DashboardApiError, match="Failed to get patient dashboard"):
            await service.get_patient_dashboard()

    @pytest.mark.asyncio
    async def test_http_error_propagates(self, service, backend):
        """Transport errors should pass through the domain module untouched."""
        backend.route("GET", "/api/dashboard/patient", httpx.Response(401))
        with pytest.raises(HTTPStatusError) as exc_info:
            await service.get_patient_dashboard()
        assert exc_info.value.status_code == 401
