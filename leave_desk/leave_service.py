"""Business logic for the leave management workflow."""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Any, Dict, List

from .models import (
    DECISION_STATUSES,
    STATUS_PENDING,
    Employee,
    LeaveApplication,
)
from .storage import RecordStore


logger = logging.getLogger(__name__)


class LeaveError(RuntimeError):
    """Custom exception raised when a leave request cannot be processed."""


class InvalidCredentials(LeaveError):
    pass


class InvalidDate(LeaveError):
    pass


class InvalidStatus(LeaveError):
    pass


class LeaveNotFound(LeaveError):
    pass


class NotAuthorized(LeaveError):
    pass


class LoginRequired(LeaveError):
    pass


class AmbiguousLeave(LeaveError):
    """Several stored applications share the requested id."""


@dataclass(frozen=True)
class Session:
    """Identity of the logged-in employee, passed to every workflow call."""

    employee_id: int
    name: str
    is_admin: bool = False

    @classmethod
    def for_employee(cls, employee: Employee) -> "Session":
        return cls(employee_id=employee.id, name=employee.name, is_admin=employee.is_admin)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "employeeId": self.employee_id,
            "name": self.name,
            "isAdmin": self.is_admin,
            "view": "admin" if self.is_admin else "employee",
        }


def _parse_date(value: str) -> dt.date:
    try:
        parsed = dt.datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError) as exc:
        raise InvalidDate("Invalid date format") from exc
    # strptime also takes unpadded fields such as "2024-5-1"
    if parsed.isoformat() != value:
        raise InvalidDate("Invalid date format")
    return parsed


def _next_leave_id(leaves: List[LeaveApplication]) -> int:
    return max((leave.id or 0 for leave in leaves), default=0) + 1


def _require_admin(session: Session) -> None:
    if not session.is_admin:
        raise NotAuthorized("Only the administrator can review leave applications")


def _check_decision(status: str) -> None:
    if status not in DECISION_STATUSES:
        raise InvalidStatus("status must be either 'Approved' or 'Rejected'")


def authenticate(store: RecordStore, username: str, password: str) -> Session:
    for employee in store.load_employees():
        if employee.name == username and employee.password == password:
            logger.info("Employee %s logged in", employee.id)
            return Session.for_employee(employee)
    raise InvalidCredentials("Invalid credentials")


def submit_leave(
    store: RecordStore,
    session: Session,
    start_date: str,
    end_date: str,
    reason: str | None = None,
) -> LeaveApplication:
    start = _parse_date(start_date)
    end = _parse_date(end_date)

    leaves = store.load_leaves()
    application = LeaveApplication(
        id=_next_leave_id(leaves),
        employee_id=session.employee_id,
        start_date=start.isoformat(),
        end_date=end.isoformat(),
        reason=reason or "",
        status=STATUS_PENDING,
    )
    leaves.append(application)
    store.save_leaves(leaves)
    logger.info(
        "Leave %s submitted by employee %s (%s to %s)",
        application.id,
        session.employee_id,
        application.start_date,
        application.end_date,
    )
    return application


def review_leave(
    store: RecordStore,
    session: Session,
    leave_id: int,
    status: str,
) -> LeaveApplication:
    """Set the status of the leave application with ``leave_id``.

    Decided applications can be decided again; the new status simply
    overwrites the old one. Files from older installs may repeat an id
    (typically 0) on every record; those have to be decided by position
    with :func:`review_leave_at`.
    """
    _require_admin(session)
    _check_decision(status)

    leaves = store.load_leaves()
    matches = [application for application in leaves if application.id == leave_id]
    if not matches:
        raise LeaveNotFound(f"Leave application '{leave_id}' was not found")
    if len(matches) > 1:
        raise AmbiguousLeave(
            f"{len(matches)} leave applications share id '{leave_id}', decide them by position"
        )

    return _apply_decision(store, leaves, matches[0], status)


def review_leave_at(
    store: RecordStore,
    session: Session,
    position: int,
    status: str,
) -> LeaveApplication:
    """Set the status of the application at ``position`` in stored order."""
    _require_admin(session)
    _check_decision(status)

    leaves = store.load_leaves()
    if not 0 <= position < len(leaves):
        raise LeaveNotFound(f"No leave application at position {position}")

    return _apply_decision(store, leaves, leaves[position], status)


def _apply_decision(
    store: RecordStore,
    leaves: List[LeaveApplication],
    application: LeaveApplication,
    status: str,
) -> LeaveApplication:
    previous = application.status
    application.status = status
    store.save_leaves(leaves)
    logger.info("Leave %s moved from %s to %s", application.id, previous, status)
    return application


def list_leaves(store: RecordStore, session: Session) -> List[LeaveApplication]:
    leaves = store.load_leaves()
    if session.is_admin:
        return leaves
    return [leave for leave in leaves if leave.employee_id == session.employee_id]


def get_balance(store: RecordStore, session: Session) -> int:
    for employee in store.load_employees():
        if employee.id == session.employee_id:
            return employee.leave_balance
    raise LeaveError(f"Employee '{session.employee_id}' was not found")


__all__ = [
    "AmbiguousLeave",
    "InvalidCredentials",
    "InvalidDate",
    "InvalidStatus",
    "LeaveError",
    "LeaveNotFound",
    "LoginRequired",
    "NotAuthorized",
    "Session",
    "authenticate",
    "get_balance",
    "list_leaves",
    "review_leave",
    "review_leave_at",
    "submit_leave",
]
