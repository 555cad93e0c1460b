# pmms/core/__init__.py

"""
FastAPI 애플리케이션의 핵심 구성 요소 패키지입니다.

- `config.py`: 애플리케이션 설정 및 환경 변수 관리 (Pydantic Settings).
- `database.py`: 데이터베이스 엔진, 세션 관리 (SQLModel 및 AsyncSQLAlchemy).
- `database_base.py`: 모든 테이블이 공유하는 타임스탬프/소프트 삭제 믹스인.
- `crud_base.py`: 소프트 삭제를 인지하는 공통 CRUD 기본 클래스.
- `security.py`: 비밀번호 해싱, JWT 발급/검증, 현재 사용자 획득.
- `authz.py`: 역할(role) 기반 권한 정책 (순수 함수).
- `dependencies.py`: 라우터에서 사용하는 공통 의존성 함수들.
- `exceptions.py`: 애플리케이션 예외 분류 및 전역 예외 핸들러.
"""

__title__ = "PMMS Core"
__version__ = "0.1.0"
__all__ = []
