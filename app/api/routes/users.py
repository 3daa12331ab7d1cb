from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase
from typing import Any, Dict, List

from ...core.database import get_db
from ...models.user import UserDocument
from ...schemas.auth import AdminStatus
from ...schemas.results import InsertResult, UpdateResult, DeleteResult
from ...services.user_service import UserService
from ..deps import get_current_claims, require_self_scope

router = APIRouter(prefix="/users", tags=["Users"])

@router.post("", response_model=InsertResult)
async def create_user(user: UserDocument, db: AsyncIOMotorDatabase = Depends(get_db)):
    return await UserService(db).create_user(user)

@router.get("", response_model=List[Dict[str, Any]])
async def list_users(
    _: Dict[str, Any] = Depends(get_current_claims),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    """List every registered user. Requires a bearer token."""
    return await UserService(db).list_users()

@router.delete("/{user_id}", response_model=DeleteResult)
async def delete_user(user_id: str, db: AsyncIOMotorDatabase = Depends(get_db)):
    return await UserService(db).delete_user(user_id)

@router.get("/admin/{email}", response_model=AdminStatus)
async def check_admin(
    email: str,
    _: Dict[str, Any] = Depends(require_self_scope),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    """Report whether the caller's own account is an admin."""
    return AdminStatus(admin=await UserService(db).is_admin(email))

@router.patch("/admin/{user_id}", response_model=UpdateResult)
async def make_admin(user_id: str, db: AsyncIOMotorDatabase = Depends(get_db)):
    return await UserService(db).make_admin(user_id)
