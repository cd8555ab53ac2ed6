"""Record types persisted in the employees and leaves documents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional


ADMIN_EMPLOYEE_ID = 0

STATUS_PENDING = "Pending"
STATUS_APPROVED = "Approved"
STATUS_REJECTED = "Rejected"

DECISION_STATUSES = (STATUS_APPROVED, STATUS_REJECTED)


@dataclass
class Employee:
    id: int
    name: str
    password: str
    leave_balance: int = 0
    leave_history: Optional[List[Any]] = None

    @property
    def is_admin(self) -> bool:
        return self.id == ADMIN_EMPLOYEE_ID

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Employee":
        return cls(
            id=int(data["id"]),
            name=data["name"],
            password=data["password"],
            leave_balance=int(data.get("leaveBalance", 0)),
            leave_history=data.get("leaveHistory"),
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "password": self.password,
            "leaveBalance": self.leave_balance,
        }
        if self.leave_history is not None:
            data["leaveHistory"] = self.leave_history
        return data


@dataclass
class LeaveApplication:
    employee_id: int
    start_date: str  # "YYYY-MM-DD"
    end_date: str
    reason: str = ""
    status: str = STATUS_PENDING
    id: Optional[int] = None  # legacy records may carry no id

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LeaveApplication":
        raw_id = data.get("id")
        return cls(
            id=int(raw_id) if raw_id is not None else None,
            employee_id=int(data["employeeId"]),
            start_date=data["startDate"],
            end_date=data["endDate"],
            reason=data.get("reason") or "",
            status=data["status"],
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.id is not None:
            data["id"] = self.id
        data.update(
            {
                "employeeId": self.employee_id,
                "startDate": self.start_date,
                "endDate": self.end_date,
                "reason": self.reason,
                "status": self.status,
            }
        )
        return data


__all__ = [
    "ADMIN_EMPLOYEE_ID",
    "DECISION_STATUSES",
    "Employee",
    "LeaveApplication",
    "STATUS_APPROVED",
    "STATUS_PENDING",
    "STATUS_REJECTED",
]
