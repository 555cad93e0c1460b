# pmms/domains/rpt/__init__.py

"""
FastAPI 애플리케이션의 'rpt' 도메인 패키지입니다.

'rpt' 도메인은 자체 테이블 없이 작업지시, 자재 사용, 인력 투입 데이터를
집계하는 읽기 전용 보고서 API를 제공합니다.

주요 서브모듈:
- `schemas.py`: 보고서 응답 스키마.
- `crud.py`: 집계 쿼리.
- `routers.py`: 보고서 API 엔드포인트 정의.
"""

__title__ = "PMMS Report Domain"
__version__ = "0.1.0"
__all__ = []
