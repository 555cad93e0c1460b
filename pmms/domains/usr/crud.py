# pmms/domains/usr/crud.py

"""
'usr' 도메인의 CRUD 작업을 담당하는 모듈입니다.
회원가입 시 중복 검사와 비밀번호 해싱, 로그인 인증 로직을 포함합니다.
"""

import logging
from typing import Optional
from sqlmodel import select, or_
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlalchemy.exc import IntegrityError

from pmms.core.crud_base import CRUDBase
from pmms.core.exceptions import ValidationError
from pmms.core.security import get_password_hash, verify_password
from pmms.domains.plt.crud import plant as plant_crud
from . import models as usr_models
from . import schemas as usr_schemas

logger = logging.getLogger(__name__)

DUPLICATE_USER_DETAIL = "User with this email or username already exists"


# =============================================================================
# 1. users 테이블 CRUD
# =============================================================================
class CRUDUser(CRUDBase[usr_models.User, usr_schemas.UserCreate, usr_schemas.UserCreate]):
    """
    사용자는 회원가입 이후 API 로 수정하지 않으므로 별도의 업데이트 스키마가 없습니다.
    (라우터는 /users 조회만 제공)
    """
    def __init__(self):
        super().__init__(model=usr_models.User)

    async def get_by_username(self, db: AsyncSession, *, username: str) -> Optional[usr_models.User]:
        """사용자명으로 사용자를 조회합니다."""
        return await self.get_by_attribute(db, attribute="username", value=username)

    async def get_by_email(self, db: AsyncSession, *, email: str) -> Optional[usr_models.User]:
        """이메일로 사용자를 조회합니다."""
        return await self.get_by_attribute(db, attribute="email", value=email)

    async def _check_unique(self, db: AsyncSession, obj_in: usr_schemas.UserCreate) -> None:
        # 고유 제약은 삭제된 사용자에도 적용되므로 삭제 여부와 무관하게 검사합니다.
        statement = select(usr_models.User).where(
            or_(usr_models.User.email == obj_in.email, usr_models.User.username == obj_in.username)
        )
        existing = (await db.execute(statement)).scalars().first()
        if existing:
            raise ValidationError(DUPLICATE_USER_DETAIL)

    async def create(self, db: AsyncSession, *, obj_in: usr_schemas.UserCreate) -> usr_models.User:
        """새로운 사용자를 생성하며 비밀번호를 해싱하고 중복과 소속 공장을 검사합니다."""
        await self._check_unique(db, obj_in)
        if obj_in.plant_id is not None:
            await plant_crud.get_or_404(db, obj_in.plant_id, detail="Plant not found")

        hashed_password = get_password_hash(obj_in.password)
        user_data = obj_in.model_dump(exclude={"password"})
        db_user = usr_models.User(**user_data, password_hash=hashed_password)

        db.add(db_user)
        try:
            await db.commit()
        except IntegrityError:
            # 동시에 같은 사용자명/이메일이 등록된 경우
            await db.rollback()
            raise ValidationError(DUPLICATE_USER_DETAIL)
        await db.refresh(db_user)
        logger.info("새 사용자 등록: id=%s username=%s role=%s", db_user.id, db_user.username, db_user.role.value)
        return db_user

    async def authenticate(self, db: AsyncSession, *, login: str, password: str) -> Optional[usr_models.User]:
        """
        사용자명 또는 이메일과 비밀번호로 사용자를 인증합니다.
        일치하는 활성 사용자가 없거나 비밀번호가 틀리면 None 을 반환합니다.
        """
        user = await self.get_by_email(db, email=login)
        if not user:
            user = await self.get_by_username(db, username=login)
        if not user:
            return None
        if not verify_password(password, user.password_hash):
            return None
        return user


user = CRUDUser()
