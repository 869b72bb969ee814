"""Async MongoDB driver seam and the Motor-backed default driver."""

from abc import ABC, abstractmethod
from typing import Any

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError, ServerSelectionTimeoutError

from mongo_connect.config.logging import get_logger

logger = get_logger(__name__)

# Database used when neither db_name nor the URI names one
DEFAULT_DATABASE = "test"


class MongoConnection:
    """Live connection returned by MotorDriver. Owned and closed by the caller."""

    def __init__(self, client: AsyncIOMotorClient, database: AsyncIOMotorDatabase):
        self.client = client
        self.database = database

    @property
    def name(self) -> str:
        return self.database.name

    async def ping(self) -> dict[str, Any]:
        """
        Health check for an open connection. Driver errors are reported, not raised:
        {"ok": True} or {"ok": False, "error": "connection_timeout" | "connection_failed"}.
        """
        try:
            await self.client.admin.command("ping")
        except ServerSelectionTimeoutError:
            error = "connection_timeout"
        except PyMongoError:
            error = "connection_failed"
        else:
            return {"ok": True}
        logger.warning("MongoDB ping failed", extra={"database": self.name, "error": error})
        return {"ok": False, "error": error}

    def close(self) -> None:
        """Close the client and release its connections."""
        try:
            self.client.close()
            logger.info("MongoDB client closed", extra={"database": self.name})
        except Exception as e:
            logger.warning("Error closing MongoDB client", extra={"error": str(e)})

    def __repr__(self) -> str:
        return f"MongoConnection(database={self.name!r})"


class BaseMongoDriver(ABC):
    """
    Contract for the component that performs the actual handshake.
    Implementations own retries, pooling and timeouts; callers pass the handle through untouched.
    """

    @abstractmethod
    async def connect(self, uri: str, db_name: str | None = None) -> Any:
        """Connect to uri and select db_name. Raise the driver's own error on failure."""
        ...


class MotorDriver(BaseMongoDriver):
    """Connects with Motor using driver defaults and waits for the server to answer a ping."""

    async def connect(self, uri: str, db_name: str | None = None) -> MongoConnection:
        client = AsyncIOMotorClient(uri)
        try:
            await client.admin.command("ping")
        except BaseException:
            # Includes cancellation: the caller never receives a handle to close
            client.close()
            raise
        if db_name:
            database = client[db_name]
        else:
            database = client.get_default_database(DEFAULT_DATABASE)
        return MongoConnection(client, database)
