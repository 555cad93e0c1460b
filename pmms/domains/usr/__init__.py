# pmms/domains/usr/__init__.py

"""
FastAPI 애플리케이션의 'usr' 도메인 패키지입니다.

'usr' 도메인은 시스템 사용자와 인증(회원가입, 로그인, 로그아웃)을 담당합니다.

주요 서브모듈:
- `models.py`: 'usr' 도메인의 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 요청 및 응답 유효성 검사를 위한 Pydantic/SQLModel 스키마.
- `crud.py`: 비동기 CRUD 로직.
- `routers.py`: FastAPI API 엔드포인트 정의.
"""

__title__ = "PMMS User Domain"
__version__ = "0.1.0"
__all__ = []
