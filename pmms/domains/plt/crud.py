# pmms/domains/plt/crud.py

"""
'plt' 도메인의 CRUD 작업을 담당하는 모듈입니다.
"""

from pmms.core.crud_base import CRUDBase
from . import models as plt_models
from . import schemas as plt_schemas


# =============================================================================
# 1. plants 테이블 CRUD
# =============================================================================
class CRUDPlant(CRUDBase[plt_models.Plant, plt_schemas.PlantCreate, plt_schemas.PlantUpdate]):
    def __init__(self):
        super().__init__(model=plt_models.Plant)


plant = CRUDPlant()
