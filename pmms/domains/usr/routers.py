# pmms/domains/usr/routers.py

"""
'usr' 도메인 (사용자 및 인증)과 관련된 API 엔드포인트를 정의하는 모듈입니다.

- /auth/register, /auth/login, /auth/token, /auth/me, /auth/logout
- /users (관리자/매니저용 사용자 조회)
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status, Query
from fastapi.security import OAuth2PasswordRequestForm
from sqlmodel.ext.asyncio.session import AsyncSession

from pmms.core.config import settings
from pmms.core.database import get_session
from pmms.core import dependencies as deps
from pmms.core.exceptions import AuthenticationError, NotFoundError

from . import crud as usr_crud
from . import models as usr_models
from . import schemas as usr_schemas


router = APIRouter(
    tags=["User & Auth Management (사용자 및 인증 관리)"],
    responses={404: {"description": "Not found"}},
)


# =============================================================================
# 1. 인증 (Authentication) 엔드포인트
# =============================================================================

@router.post("/auth/register", response_model=usr_schemas.UserRead, status_code=status.HTTP_201_CREATED, summary="회원가입")
async def register_user(
    user_in: usr_schemas.UserCreate,
    db: AsyncSession = Depends(get_session),
):
    return await usr_crud.user.create(db, obj_in=user_in)


@router.post("/auth/login", response_model=usr_schemas.LoginResponse, summary="이메일/비밀번호 로그인")
async def login(
    credentials: usr_schemas.LoginRequest,
    response: Response,
    db: AsyncSession = Depends(get_session),
):
    """
    로그인에 성공하면 토큰을 본문으로 반환하고, 같은 토큰을 httpOnly 쿠키로도 설정합니다.
    """
    user = await usr_crud.user.authenticate(db, login=credentials.email, password=credentials.password)
    if not user:
        raise AuthenticationError("Incorrect email or password")

    access_token = deps.create_user_token(user)
    response.set_cookie(
        key=settings.JWT_COOKIE_NAME,
        value=access_token,
        httponly=True,
        samesite="strict",
        secure=settings.APP_ENV == "production",
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )
    return {
        "access_token": access_token,
        "token_type": "bearer",
        "user": {"id": user.id, "email": user.email, "role": user.role},
    }


@router.post("/auth/token", response_model=usr_schemas.Token, summary="Access Token 획득 (OAuth2 폼)")
async def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: AsyncSession = Depends(get_session),
):
    # username 필드에는 사용자명 또는 이메일을 모두 허용합니다.
    user = await usr_crud.user.authenticate(db, login=form_data.username, password=form_data.password)
    if not user:
        raise AuthenticationError("Incorrect username or password")
    return {"access_token": deps.create_user_token(user), "token_type": "bearer"}


@router.get("/auth/me", response_model=usr_schemas.UserRead, summary="현재 사용자 정보 조회")
async def read_users_me(current_user: usr_models.User = Depends(deps.get_current_user)):
    return current_user


@router.post("/auth/logout", response_model=usr_schemas.Message, summary="로그아웃")
async def logout(response: Response):
    response.delete_cookie(key=settings.JWT_COOKIE_NAME, httponly=True, samesite="strict")
    return {"message": "Logged out successfully"}


# =============================================================================
# 2. 사용자 (User) 조회 엔드포인트
# =============================================================================

@router.get("/users", response_model=List[usr_schemas.UserRead], summary="사용자 목록 조회")
async def read_users(
    db: AsyncSession = Depends(get_session),
    plant_id: Optional[int] = Query(None, description="공장 ID로 필터링"),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1),
    current_user: usr_models.User = Depends(deps.require_permission("users", "read")),
):
    filters = {"plant_id": plant_id} if plant_id is not None else {}
    return await usr_crud.user.get_multi(db, skip=skip, limit=limit, **filters)


@router.get("/users/{user_id}", response_model=usr_schemas.UserRead, summary="특정 사용자 조회")
async def read_user(
    user_id: int,
    db: AsyncSession = Depends(get_session),
    current_user: usr_models.User = Depends(deps.require_permission("users", "read")),
):
    db_user = await usr_crud.user.get(db, id=user_id)
    if not db_user:
        raise NotFoundError("User not found")
    return db_user
