"""
Backend client configuration and lifecycle.

Provides Supabase async client construction from settings, an optional
process-wide client handle, and health check helpers. Repositories take
the client as a constructor argument; the shared handle is only a
convenience for applications that want one.
"""

from typing import Any, Dict, Optional

from supabase import AsyncClient, acreate_client
from supabase.lib.client_options import AsyncClientOptions

from recordstore.core.config import Settings, get_settings
from recordstore.core.exceptions import ClientNotInitializedError, ConfigurationError
from recordstore.core.logging_config import get_logger
from recordstore.repositories.interfaces import TableClient
from recordstore.repositories.record import RecordRepository

logger = get_logger(__name__)


# Shared client handle
# Set by init_client() at application startup
_client: Optional[TableClient] = None


async def create_client(settings: Optional[Settings] = None) -> AsyncClient:
    """
    Create and configure the async Supabase client.

    Args:
        settings: Settings to use (defaults to get_settings())

    Returns:
        Configured AsyncClient instance

    Raises:
        ConfigurationError: If the client rejects the URL or key

    Note:
        Timeouts and connection reuse are handled by the client itself;
        client_timeout is passed through as the PostgREST timeout.
    """
    settings = settings or get_settings()

    options = AsyncClientOptions(
        schema=settings.supabase_schema,
        postgrest_client_timeout=settings.client_timeout,
    )

    try:
        client = await acreate_client(
            settings.supabase_url,
            settings.supabase_key,
            options=options,
        )
    except Exception as e:
        raise ConfigurationError(f"Could not create backend client: {e}") from e

    logger.info(
        f"Backend client created for {settings.supabase_url} "
        f"(schema: {settings.supabase_schema}, timeout: {settings.client_timeout}s)"
    )
    return client


async def init_client(
    settings: Optional[Settings] = None,
    client: Optional[TableClient] = None
) -> TableClient:
    """
    Initialize the shared client handle.

    Args:
        settings: Settings used to build the client
        client: Pre-built client to install instead (skips construction)

    Returns:
        The installed client

    Example:
        async def startup():
            await init_client()
    """
    global _client

    if client is None:
        client = await create_client(settings)

    _client = client
    return client


def get_client() -> TableClient:
    """
    Return the shared client handle.

    Raises:
        ClientNotInitializedError: If init_client() has not been called
    """
    if _client is None:
        raise ClientNotInitializedError()
    return _client


async def close_client() -> None:
    """
    Drop the shared client handle.

    Closes the client's PostgREST session when it exposes one. No-op if
    nothing was initialized.
    """
    global _client

    if _client is None:
        return

    client, _client = _client, None

    postgrest = getattr(client, "postgrest", None)
    if postgrest is not None and hasattr(postgrest, "aclose"):
        await postgrest.aclose()

    logger.info("Backend client closed")


def get_repository() -> RecordRepository:
    """Return a RecordRepository over the shared client."""
    return RecordRepository(get_client())


class DatabaseHealthCheck:
    """
    Backend health check utilities.

    Provides methods to verify backend connectivity and report settings.
    """

    @staticmethod
    async def check_connection(client: TableClient, table: str) -> bool:
        """
        Check if the backend answers a minimal query on a table.

        Args:
            client: Client to probe
            table: Any table the key is allowed to read

        Returns:
            True if the query succeeded, False otherwise

        Example:
            is_healthy = await DatabaseHealthCheck.check_connection(client, "items")
        """
        try:
            await client.table(table).select("*").limit(1).execute()
            return True
        except Exception as e:
            logger.warning(f"Backend health check on {table} failed: {e}")
            return False

    @staticmethod
    def get_database_info(settings: Optional[Settings] = None) -> Dict[str, Any]:
        """
        Get backend information for monitoring.

        The API key is never included.

        Example:
            info = DatabaseHealthCheck.get_database_info()
            print(f"Backend: {info['url']}")
        """
        settings = settings or get_settings()
        return {
            "url": settings.supabase_url,
            "schema": settings.supabase_schema,
            "timeout": settings.client_timeout,
            "async": True,
        }
