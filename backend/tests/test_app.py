"""
Restaurant API — Application Shell Tests
=========================================

Health endpoint, request id propagation, access-log levels and settings
validation.
"""

import logging

import pytest

from restaurant_api.config import DEFAULT_DATABASE_URL, Settings
from restaurant_api.middleware.logging import level_for_status


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_reports_database(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert body["uptime_seconds"] >= 0

    @pytest.mark.asyncio
    async def test_request_id_generated_when_absent(self, test_client):
        response = await test_client.get("/health")
        assert len(response.headers["x-request-id"]) == 8


class TestAccessLogLevels:

    def test_levels_follow_status_class(self):
        assert level_for_status(200) == logging.INFO
        assert level_for_status(404) == logging.WARNING
        assert level_for_status(503) == logging.ERROR


class TestSettings:

    def test_rpc_prefix_is_normalized(self):
        assert Settings(rpc_prefix="api/trpc/").rpc_prefix == "/api/trpc"

    def test_rpc_prefix_cannot_be_root(self):
        with pytest.raises(ValueError):
            Settings(rpc_prefix="/")

    def test_log_level_is_upper_cased(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_cors_origins_list(self):
        settings = Settings(cors_origins="http://a.test, http://b.test")
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_production_rejects_default_credentials(self):
        settings = Settings(environment="production", database_url=DEFAULT_DATABASE_URL)
        with pytest.raises(ValueError, match="default credentials"):
            settings.validate_required_for_production()

    def test_production_with_real_settings_passes(self):
        settings = Settings(
            environment="production",
            database_url="postgresql+asyncpg://app:s3cret@db:5432/restaurant",
            cors_origins="https://restaurant.example",
        )
        settings.validate_required_for_production()

    def test_development_skips_checks(self):
        Settings(environment="development", database_url="sqlite+aiosqlite://").validate_required_for_production()
