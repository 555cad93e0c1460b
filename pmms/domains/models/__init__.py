# pmms/domains/models/__init__.py

"""
모든 도메인의 SQLModel 테이블 클래스를 한 곳에서 등록하는 스키마 모듈입니다.

SQLModel.metadata 와 SQLAlchemy 매퍼 레지스트리가 모든 테이블과 관계를 인식하도록
pmms.core.database 가 프로세스 시작 시 이 모듈을 한 번 임포트합니다.
모델 파일 사이의 관계는 foreign_key 필드와 Relationship(...) 으로만 선언하며,
별도의 연관 등록 코드는 두지 않습니다.
"""

# plt (Plant)
from pmms.domains.plt.models import Plant

# ven (Vendor)
from pmms.domains.ven.models import Vendor

# usr (User, UserRole)
from pmms.domains.usr.models import User, UserRole

# fms (Machine, MaintenanceSchedule)
from pmms.domains.fms.models import Machine, MachineStatus, MaintenanceSchedule

# inv (Inventory)
from pmms.domains.inv.models import Inventory

# wo (WorkOrder, WorkOrderPart, WorkOrderLabor)
from pmms.domains.wo.models import (
    WorkOrder, WorkOrderStatus, WorkOrderPriority, WorkOrderPart, WorkOrderLabor
)

# ops (Call)
from pmms.domains.ops.models import Call, CallStatus


__all__ = [
    # plt
    "Plant",
    # ven
    "Vendor",
    # usr
    "User", "UserRole",
    # fms
    "Machine", "MachineStatus", "MaintenanceSchedule",
    # inv
    "Inventory",
    # wo
    "WorkOrder", "WorkOrderStatus", "WorkOrderPriority", "WorkOrderPart", "WorkOrderLabor",
    # ops
    "Call", "CallStatus",
]
