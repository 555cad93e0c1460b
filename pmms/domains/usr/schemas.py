# pmms/domains/usr/schemas.py

"""
'usr' 도메인 (사용자 및 인증)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from typing import Optional
from datetime import datetime
from sqlmodel import SQLModel, Field
from pydantic import BaseModel, EmailStr

from . import models as usr_models


# =============================================================================
# 1. 사용자 (User) 스키마
# =============================================================================
class UserBase(SQLModel):
    """사용자 정보의 기본 필드를 정의하는 스키마"""
    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr = Field(..., max_length=100)
    role: usr_models.UserRole = Field(default=usr_models.UserRole.TECHNICIAN, description="사용자 역할")
    plant_id: Optional[int] = None


class UserCreate(UserBase):
    """회원가입(사용자 생성)을 위한 스키마"""
    password: str = Field(..., min_length=6)


class UserRead(UserBase):
    """
    사용자 정보 조회를 위한 기본 스키마.
    비밀번호 해시값 등 민감한 정보는 제외됩니다.
    """
    id: int
    created_at: datetime = Field(..., description="레코드 생성 일시")
    updated_at: datetime = Field(..., description="레코드 마지막 업데이트 일시")


class UserSummary(SQLModel):
    """다른 리소스에 포함되어 반환되는 축약 사용자 정보"""
    id: int
    username: str
    email: str
    role: usr_models.UserRole


# =============================================================================
# 2. 인증 (Auth) 스키마
# =============================================================================
class LoginRequest(BaseModel):
    """이메일/비밀번호 로그인 요청 스키마"""
    email: EmailStr
    password: str


class Token(BaseModel):
    """JWT 토큰 응답 스키마"""
    access_token: str
    token_type: str


class LoginUser(BaseModel):
    id: int
    email: str
    role: usr_models.UserRole


class LoginResponse(Token):
    """로그인 응답: 토큰과 최소한의 사용자 정보"""
    user: LoginUser


class Message(BaseModel):
    message: str
