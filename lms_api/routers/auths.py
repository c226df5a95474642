from fastapi import APIRouter, Depends, Form, status
from sqlalchemy.ext.asyncio import AsyncSession

from lms_api.database.db import get_db
from lms_api.models.users import User as UserModel
from lms_api.schemas.users import SignUpRequest, TokenResponse, UserResponse
from lms_api.services.auths import get_current_user, login_user, signup_user, token_for

auth_router = APIRouter(prefix="/auth", tags=["auth"])


@auth_router.post(
    "/signup", response_model=TokenResponse, status_code=status.HTTP_201_CREATED
)
async def signup(req: SignUpRequest, db: AsyncSession = Depends(get_db)):
    user = await signup_user(db, req)
    # Automatically log in the user after successful signup
    return TokenResponse(access_token=token_for(user))


@auth_router.post("/token", response_model=TokenResponse)
async def token(
    username: str = Form(..., description="The account email"),
    password: str = Form(...),
    db: AsyncSession = Depends(get_db),
):
    access_token = await login_user(db, username, password)
    return TokenResponse(access_token=access_token)


@auth_router.get("/me", response_model=UserResponse)
async def me(current_user: UserModel = Depends(get_current_user)):
    return current_user
