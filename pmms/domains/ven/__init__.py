# pmms/domains/ven/__init__.py

"""
FastAPI 애플리케이션의 'ven' 도메인 패키지입니다.

'ven' 도메인은 자재를 공급하는 공급업체(Vendor) 정보를 관리합니다.

주요 서브모듈:
- `models.py`: 'ven' 도메인의 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 요청 및 응답 유효성 검사를 위한 Pydantic/SQLModel 스키마.
- `crud.py`: 비동기 CRUD 로직.
- `routers.py`: FastAPI API 엔드포인트 정의.
"""

__title__ = "PMMS Vendor Domain"
__version__ = "0.1.0"
__all__ = []
