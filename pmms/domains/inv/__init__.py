# pmms/domains/inv/__init__.py

"""
FastAPI 애플리케이션의 'inv' 도메인 패키지입니다.

'inv' 도메인은 자재(Inventory) 품목과 재고 수량을 관리합니다.
재고 수량은 작업지시 자재 사용('wo' 도메인)에 의해 차감/복원되며 음수가 될 수 없습니다.

주요 서브모듈:
- `models.py`: 'inv' 도메인의 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 요청 및 응답 유효성 검사를 위한 Pydantic/SQLModel 스키마.
- `crud.py`: 비동기 CRUD 로직.
- `routers.py`: FastAPI API 엔드포인트 정의.
"""

__title__ = "PMMS Inventory Domain"
__version__ = "0.1.0"
__all__ = []
