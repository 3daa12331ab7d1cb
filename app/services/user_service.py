from motor.motor_asyncio import AsyncIOMotorDatabase
from typing import Any, Dict, List
import logging

from ..core.config import settings
from ..core.security import Role, is_admin
from ..models.user import UserDocument
from ..schemas.results import InsertResult, UpdateResult, DeleteResult
from ..utils.mongo import serialize, to_object_id

logger = logging.getLogger(__name__)

class UserService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db[settings.USERS_COLLECTION]

    async def create_user(self, user: UserDocument) -> InsertResult:
        """Register a user. Emails are not checked for uniqueness."""
        result = await self.collection.insert_one(user.model_dump(exclude_unset=True))
        return InsertResult.from_result(result)

    async def list_users(self) -> List[Dict[str, Any]]:
        users = await self.collection.find().to_list(length=None)
        return serialize(users)

    async def delete_user(self, user_id: str) -> DeleteResult:
        result = await self.collection.delete_one({"_id": to_object_id(user_id)})
        return DeleteResult.from_result(result)

    async def is_admin(self, email: str) -> bool:
        """Whether the user with ``email`` holds the admin role; unknown users are not."""
        user = await self.collection.find_one({"email": email})
        if not user:
            return False
        return is_admin(user.get("role"))

    async def make_admin(self, user_id: str) -> UpdateResult:
        result = await self.collection.update_one(
            {"_id": to_object_id(user_id)},
            {"$set": {"role": Role.ADMIN.value}}
        )
        logger.info(f"Promoted user {user_id} to admin (matched={result.matched_count})")
        return UpdateResult.from_result(result)
