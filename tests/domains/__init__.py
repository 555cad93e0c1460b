# tests/domains/__init__.py

"""
도메인별 API 통합 테스트 패키지입니다.

- `test_usr.py`: 회원가입, 로그인/로그아웃, 사용자 조회.
- `test_plt.py`: 공장 관리.
- `test_ven.py`: 공급업체 관리.
- `test_fms.py`: 설비와 예방정비 일정.
- `test_inv.py`: 자재 관리.
- `test_wo.py`: 작업지시, 자재 사용(재고 원장), 인력 투입.
- `test_ops.py`: 설비 고장 호출.
- `test_rpt.py`: 집계 보고서.
"""

__title__ = "PMMS Domain Tests"
__description__ = "Categorized tests for each business domain in PMMS FastAPI application."
__version__ = "0.1.0"
__all__ = []
