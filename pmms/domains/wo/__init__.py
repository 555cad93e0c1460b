# pmms/domains/wo/__init__.py

"""
FastAPI 애플리케이션의 'wo' 도메인 패키지입니다.

'wo' 도메인은 작업지시(WorkOrder), 작업지시 자재 사용(WorkOrderPart),
작업지시 인력 투입(WorkOrderLabor)을 관리합니다. 자재 사용 기록은 재고 원장 역할을 합니다.

주요 서브모듈:
- `models.py`: 'wo' 도메인의 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 요청 및 응답 유효성 검사를 위한 Pydantic/SQLModel 스키마.
- `crud.py`: 비동기 CRUD 로직.
- `routers.py`: FastAPI API 엔드포인트 정의.
"""

__title__ = "PMMS Work Order Domain"
__version__ = "0.1.0"
__all__ = []
