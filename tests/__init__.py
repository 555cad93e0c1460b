# tests/__init__.py

"""
PMMS FastAPI 애플리케이션의 테스트 스위트 패키지입니다.

테스트는 `pytest` 와 `pytest-asyncio` 를 기반으로 하며, 인메모리 SQLite(aiosqlite)
데이터베이스와 httpx `AsyncClient` 로 실제 API 를 호출하는 통합 테스트가 중심입니다.

- `conftest.py`: DB 엔진/세션, 역할별 인증 클라이언트, 테스트 데이터 픽스처.
- `test_main.py`: 루트/헬스 체크와 전역 예외 핸들러.
- `test_authz.py`: 역할 기반 권한 정책 (순수 함수).
- `domains/`: 도메인별 API 통합 테스트.
"""

__title__ = "PMMS API Tests"
__description__ = "Test suite for PMMS FastAPI application."
__version__ = "0.1.0"
__all__ = []
