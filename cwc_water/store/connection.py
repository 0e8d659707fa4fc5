"""MongoDB connection."""

import asyncio
from typing import Optional

from loguru import logger
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from cwc_water.utils.config import MongoConfig, settings
from cwc_water.utils.errors import ConfigurationError


class MongoConnection:
    """Lazily connected MongoDB handle.

    The client is created and pinged on the first call to :meth:`database`
    and reused afterwards; callers arriving during that first connect share
    it. An already constructed client can be passed in, in which case no
    connection check is made.
    """

    def __init__(self, uri: Optional[str] = None, database: str = "cwc",
                 client=None, server_selection_timeout_ms: int = 10000):
        if client is None and not uri:
            raise ConfigurationError("Missing MONGODB_URI in environment")
        self.uri = uri
        self.database_name = database
        self.server_selection_timeout_ms = server_selection_timeout_ms
        self._client = client
        self._connect_lock = asyncio.Lock()

    @classmethod
    def from_config(cls, config: MongoConfig = None) -> "MongoConnection":
        config = config or settings.mongo
        return cls(
            uri=config.uri,
            database=config.database,
            server_selection_timeout_ms=config.server_selection_timeout_ms,
        )

    async def _connect(self):
        client = AsyncIOMotorClient(
            self.uri,
            serverSelectionTimeoutMS=self.server_selection_timeout_ms,
        )
        try:
            await client.admin.command("ping")
        except Exception as e:
            client.close()
            logger.error(f"MongoDB connection failed: {e}")
            raise
        self._client = client
        logger.info(f"Connected to MongoDB database '{self.database_name}'")

    async def database(self) -> AsyncIOMotorDatabase:
        if self._client is None:
            # concurrent first callers wait for a single connect
            async with self._connect_lock:
                if self._client is None:
                    await self._connect()
        return self._client[self.database_name]

    async def close(self):
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.info("MongoDB connection closed")
