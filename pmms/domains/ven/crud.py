# pmms/domains/ven/crud.py

"""
'ven' 도메인의 CRUD(Create, Read, Update, Delete) 작업을 담당하는 모듈입니다.
"""

from pmms.core.crud_base import CRUDBase
from . import models as ven_models
from . import schemas as ven_schemas


# =============================================================================
# 1. vendors 테이블 CRUD
# =============================================================================
class CRUDVendor(CRUDBase[ven_models.Vendor, ven_schemas.VendorCreate, ven_schemas.VendorUpdate]):
    def __init__(self):
        super().__init__(ven_models.Vendor)


vendor = CRUDVendor()
