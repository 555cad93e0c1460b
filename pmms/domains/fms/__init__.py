# pmms/domains/fms/__init__.py

"""
FastAPI 애플리케이션의 'fms' 도메인 패키지입니다.

'fms' 도메인은 설비(Machine)와 예방정비 일정(MaintenanceSchedule)을 관리하며,
정비 완료 시 다음 정비 예정일을 계산하여 설비에 반영하는 로직을 포함합니다.

주요 서브모듈:
- `models.py`: 'fms' 도메인의 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 요청 및 응답 유효성 검사를 위한 Pydantic/SQLModel 스키마.
- `crud.py`: 비동기 CRUD 로직.
- `routers.py`: FastAPI API 엔드포인트 정의.
"""

__title__ = "PMMS Facility Maintenance Domain"
__version__ = "0.1.0"
__all__ = []
