from uuid import UUID
from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from lms_api.models.users import User, UserRole
from lms_api.schemas.users import (
    UserDetail,
    UserRoleCreate,
    UserRoleResponse,
    UserRoleUpdate,
    UserUpdate,
)
from lms_api.services.auths import hash_password
from lms_api.services.base import CRUDService


users = CRUDService(User, label="User", populate=("role",))
roles = CRUDService(
    UserRole, label="User role", conflict_detail="User role already exists."
)


class UsersService:

    @staticmethod
    async def list_users(db: AsyncSession):
        return [UserDetail.model_validate(user) for user in await users.list(db)]

    @staticmethod
    async def get_user_by_id(user_id: UUID, db: AsyncSession):
        return UserDetail.model_validate(await users.get(db, user_id))

    @staticmethod
    async def update_user(user_id: UUID, user_update: UserUpdate, db: AsyncSession):
        values = user_update.model_dump(exclude_unset=True)
        password = values.pop("password", None)
        if password is not None:
            if not password.strip():
                raise HTTPException(status_code=400, detail="Password cannot be empty")
            values["password_hash"] = hash_password(password)

        await users.update(db, user_id, values)
        return UserDetail.model_validate(await users.get(db, user_id))

    @staticmethod
    async def delete_user(user_id: UUID, db: AsyncSession):
        return await users.delete(db, user_id)


class UserRolesService:

    @staticmethod
    async def create_role(role_create: UserRoleCreate, db: AsyncSession):
        if await roles.find_one(db, UserRole.name == role_create.name):
            raise HTTPException(status_code=409, detail=roles.conflict_detail)
        role = await roles.create(db, **role_create.model_dump())
        return UserRoleResponse.model_validate(role)

    @staticmethod
    async def list_roles(db: AsyncSession):
        return [UserRoleResponse.model_validate(r) for r in await roles.list(db)]

    @staticmethod
    async def get_role(role_id: UUID, db: AsyncSession):
        return UserRoleResponse.model_validate(await roles.get(db, role_id))

    @staticmethod
    async def update_role(role_id: UUID, role_update: UserRoleUpdate, db: AsyncSession):
        role = await roles.update(db, role_id, role_update.model_dump(exclude_unset=True))
        return UserRoleResponse.model_validate(role)

    @staticmethod
    async def delete_role(role_id: UUID, db: AsyncSession):
        return await roles.delete(db, role_id)
