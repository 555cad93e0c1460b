# pmms/core/security.py

"""
애플리케이션의 보안 관련 유틸리티 함수 및 의존성 주입을 정의하는 모듈입니다.

- 비밀번호 해싱 및 검증.
- JWT(JSON Web Token) 생성 및 검증.
- Authorization 헤더(Bearer) 또는 jwt 쿠키에서 토큰을 읽어 현재 사용자 획득.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError
from passlib.context import CryptContext  # 비밀번호 해싱을 위한 라이브러리
from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from pmms import API_PREFIX
from pmms.core.config import settings
from pmms.core.database import get_session
from pmms.core.exceptions import AuthenticationError
from pmms.domains.usr import models as usr_models

logger = logging.getLogger(__name__)


# --- 비밀번호 해싱 설정 ---
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    일반 텍스트 비밀번호와 해싱된 비밀번호를 비교하여 일치하는지 확인합니다.
    """
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


# --- OAuth2 스키마 설정 ---
# Swagger UI가 /auth/token 으로 토큰을 요청하도록 설정합니다.
# 쿠키 인증도 허용하므로 헤더가 없을 때 바로 401을 내지 않습니다 (auto_error=False).
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{API_PREFIX}/auth/token", auto_error=False)


# --- JWT 토큰 생성 및 검증 ---
def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Access Token을 생성합니다.
    """
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY.get_secret_value(), algorithm=settings.ALGORITHM)


def create_user_token(user: usr_models.User) -> str:
    """사용자 ID(sub)와 역할(role)을 담은 Access Token을 발급합니다."""
    return create_access_token(data={"sub": str(user.id), "role": user.role.value})


def decode_access_token(token: str) -> dict:
    """토큰을 검증하고 payload 를 반환합니다. 유효하지 않거나 만료된 경우 AuthenticationError."""
    try:
        return jwt.decode(token, settings.SECRET_KEY.get_secret_value(), algorithms=[settings.ALGORITHM])
    except JWTError as e:
        logger.warning("JWT 검증 실패: %s", e)
        raise AuthenticationError()


async def get_current_user(
    request: Request,
    token: Optional[str] = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_session),
) -> usr_models.User:
    """
    JWT 토큰을 디코딩하고 검증하여 현재 사용자를 데이터베이스에서 가져옵니다.
    토큰은 Authorization 헤더를 우선하고, 없으면 jwt 쿠키에서 읽습니다.
    """
    if not token:
        token = request.cookies.get(settings.JWT_COOKIE_NAME)
    if not token:
        raise AuthenticationError("Not authenticated")

    payload = decode_access_token(token)
    subject = payload.get("sub")
    if subject is None or not str(subject).isdigit():
        raise AuthenticationError()

    # 소프트 삭제된 사용자는 인증할 수 없습니다.
    statement = select(usr_models.User).where(
        usr_models.User.id == int(subject),
        usr_models.User.deleted_at.is_(None),
    )
    result = await db.execute(statement)
    user = result.scalars().first()
    if user is None:
        logger.warning("토큰의 사용자(id=%s)를 찾을 수 없습니다.", subject)
        raise AuthenticationError()
    return user
