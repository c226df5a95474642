from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from lms_api.database.db import get_db
from lms_api.models.users import User as UserModel
from lms_api.schemas.base import MessageResponse
from lms_api.schemas.users import (
    UserDetail,
    UserRoleCreate,
    UserRoleResponse,
    UserRoleUpdate,
    UserUpdate,
)
from lms_api.services.auths import get_current_user
from lms_api.services.users import UserRolesService, UsersService
from lms_api.utils import to_uuid

users_router = APIRouter(prefix="/users", tags=["users"])
user_roles_router = APIRouter(prefix="/user-roles", tags=["user roles"])


# ============= Users =============


@users_router.get("", response_model=List[UserDetail])
async def list_users(
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await UsersService.list_users(db)


@users_router.get("/{user_id}", response_model=UserDetail)
async def get_user(
    user_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await UsersService.get_user_by_id(to_uuid(user_id), db)


@users_router.put("/{user_id}", response_model=UserDetail)
async def update_user(
    user_id: str,
    user_update: UserUpdate,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await UsersService.update_user(to_uuid(user_id), user_update, db)


@users_router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await UsersService.delete_user(to_uuid(user_id), db)


# ============= User roles =============


@user_roles_router.post(
    "", response_model=UserRoleResponse, status_code=status.HTTP_201_CREATED
)
async def create_role(
    role_create: UserRoleCreate,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await UserRolesService.create_role(role_create, db)


@user_roles_router.get("", response_model=List[UserRoleResponse])
async def list_roles(
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await UserRolesService.list_roles(db)


@user_roles_router.get("/{role_id}", response_model=UserRoleResponse)
async def get_role(
    role_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await UserRolesService.get_role(to_uuid(role_id), db)


@user_roles_router.put("/{role_id}", response_model=UserRoleResponse)
async def update_role(
    role_id: str,
    role_update: UserRoleUpdate,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await UserRolesService.update_role(to_uuid(role_id), role_update, db)


@user_roles_router.delete("/{role_id}", response_model=MessageResponse)
async def delete_role(
    role_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await UserRolesService.delete_role(to_uuid(role_id), db)
