from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi
from typing import Optional
import logging

from .config import settings

logger = logging.getLogger(__name__)

class MongoDB:
    """Process-wide MongoDB handle, opened on startup and closed on shutdown."""

    def __init__(self, url: Optional[str] = None, database_name: Optional[str] = None):
        self.url = url or settings.get_database_url
        self.database_name = database_name or settings.DATABASE_NAME
        self.client: Optional[AsyncIOMotorClient] = None

    def connect(self) -> None:
        self.client = AsyncIOMotorClient(
            self.url,
            server_api=ServerApi("1", strict=True, deprecation_errors=True),
            serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS,
        )

    def close(self) -> None:
        if self.client is not None:
            self.client.close()
            self.client = None

    @property
    def database(self) -> AsyncIOMotorDatabase:
        if self.client is None:
            raise RuntimeError("MongoDB client is not connected")
        return self.client[self.database_name]

    async def ping(self) -> bool:
        """Check MongoDB connectivity."""
        if self.client is None:
            return False
        try:
            await self.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning(f"MongoDB ping failed: {str(e)}")
            return False

# Database dependency
def get_db(request: Request) -> AsyncIOMotorDatabase:
    """Get the database attached to the running application."""
    return request.app.state.mongo.database
