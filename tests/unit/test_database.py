"""
Unit tests for backend client lifecycle and health checks.
"""

from unittest.mock import AsyncMock, Mock, patch

import pytest

from recordstore.core import database
from recordstore.core.config import Settings
from recordstore.core.database import (
    DatabaseHealthCheck,
    close_client,
    create_client,
    get_client,
    get_repository,
    init_client,
)
from recordstore.core.exceptions import ClientNotInitializedError, ConfigurationError
from recordstore.repositories.record import RecordRepository


@pytest.fixture
def settings():
    return Settings(
        supabase_url="https://abc.supabase.co",
        supabase_key="service-role-key-for-tests",
        supabase_schema="inventory",
        client_timeout=3,
    )


@pytest.fixture
def mock_acreate_client():
    with patch("recordstore.core.database.acreate_client", new_callable=AsyncMock) as mock:
        mock.return_value = Mock(name="AsyncClient")
        yield mock


class TestCreateClient:
    """Test client construction from settings."""

    async def test_passes_settings_to_client(self, settings, mock_acreate_client):
        client = await create_client(settings)

        assert client is mock_acreate_client.return_value
        args, kwargs = mock_acreate_client.call_args
        assert args == ("https://abc.supabase.co", "service-role-key-for-tests")
        assert kwargs["options"].schema == "inventory"
        assert kwargs["options"].postgrest_client_timeout == 3

    async def test_defaults_to_environment_settings(self, mock_acreate_client):
        await create_client()

        args, _ = mock_acreate_client.call_args
        assert args[0] == "https://test-project.supabase.co"

    async def test_client_error_becomes_configuration_error(self, settings, mock_acreate_client):
        mock_acreate_client.side_effect = Exception("Invalid API key")

        with pytest.raises(ConfigurationError) as exc_info:
            await create_client(settings)

        assert "Invalid API key" in str(exc_info.value)
        assert exc_info.value.__cause__ is mock_acreate_client.side_effect


class TestSharedClient:
    """Test init/get/close of the shared handle."""

    def test_get_before_init_raises(self):
        with pytest.raises(ClientNotInitializedError):
            get_client()

    async def test_init_builds_client(self, settings, mock_acreate_client):
        client = await init_client(settings)

        assert client is mock_acreate_client.return_value
        assert get_client() is client

    async def test_init_with_prebuilt_client(self, fake_client, mock_acreate_client):
        await init_client(client=fake_client)

        assert get_client() is fake_client
        mock_acreate_client.assert_not_awaited()

    async def test_get_repository_wraps_shared_client(self, fake_client):
        await init_client(client=fake_client)

        repository = get_repository()

        assert isinstance(repository, RecordRepository)
        assert repository.client is fake_client

    async def test_close_releases_postgrest_session(self):
        client = Mock()
        client.postgrest.aclose = AsyncMock()
        await init_client(client=client)

        await close_client()

        client.postgrest.aclose.assert_awaited_once()
        assert database._client is None
        with pytest.raises(ClientNotInitializedError):
            get_client()

    async def test_close_without_postgrest_session(self, fake_client):
        await init_client(client=fake_client)

        await close_client()

        assert database._client is None

    async def test_close_when_not_initialized_is_noop(self):
        await close_client()

        assert database._client is None


class TestDatabaseHealthCheck:
    """Test health check helpers."""

    async def test_check_connection_healthy(self, fake_client):
        assert await DatabaseHealthCheck.check_connection(fake_client, "items") is True
        assert fake_client.requests == [("items", "select")]

    async def test_check_connection_unknown_table(self, fake_client):
        assert await DatabaseHealthCheck.check_connection(fake_client, "missing") is False

    async def test_check_connection_backend_down(self, fake_client):
        fake_client.fail_with = ConnectionError("refused")

        assert await DatabaseHealthCheck.check_connection(fake_client, "items") is False

    def test_database_info_hides_key(self, settings):
        info = DatabaseHealthCheck.get_database_info(settings)

        assert info == {
            "url": "https://abc.supabase.co",
            "schema": "inventory",
            "timeout": 3.0,
            "async": True,
        }
        assert "service-role-key-for-tests" not in str(info)
