"""HTTP routes for the leave desk service."""

from __future__ import annotations

from typing import Any, Dict, Optional

from flask import (
    Blueprint,
    current_app,
    jsonify,
    request,
    session as cookie_session,
)

from .leave_service import (
    AmbiguousLeave,
    InvalidCredentials,
    LeaveError,
    LeaveNotFound,
    LoginRequired,
    NotAuthorized,
    Session,
    authenticate,
    get_balance,
    list_leaves,
    review_leave,
    review_leave_at,
    submit_leave,
)
from .storage import RecordStore


api_bp = Blueprint("leave_api", __name__)


ERROR_STATUS = {
    InvalidCredentials: 401,
    LoginRequired: 401,
    NotAuthorized: 403,
    LeaveNotFound: 404,
    AmbiguousLeave: 409,
}


def _store() -> RecordStore:
    return current_app.extensions["record_store"]


def _current_session() -> Optional[Session]:
    data = cookie_session.get("identity")
    if not data:
        return None
    return Session(
        employee_id=data["employee_id"],
        name=data["name"],
        is_admin=data["is_admin"],
    )


def _json_payload() -> Dict[str, Any]:
    payload = request.get_json(force=True)
    if not isinstance(payload, dict):
        raise LeaveError("Request body must be a JSON object")
    return payload


def _decision_status() -> str:
    status = _json_payload().get("status")
    if not status:
        raise LeaveError("'status' must be 'Approved' or 'Rejected'")
    return status


def _require_session() -> Session:
    session = _current_session()
    if session is None:
        raise LoginRequired("Login required")
    return session


@api_bp.errorhandler(LeaveError)

def handle_leave_error(exc: LeaveError):
    response = {"error": str(exc)}
    return jsonify(response), ERROR_STATUS.get(type(exc), 400)



@api_bp.route("/health", methods=["GET"])

def health_check():
    return jsonify({"status": "ok"})



@api_bp.route("/login", methods=["POST"])

def login():
    payload = _json_payload()
    username = payload.get("username") or ""
    password = payload.get("password") or ""

    session = authenticate(_store(), username, password)
    cookie_session["identity"] = {
        "employee_id": session.employee_id,
        "name": session.name,
        "is_admin": session.is_admin,
    }
    return jsonify(session.to_dict())



@api_bp.route("/logout", methods=["POST"])

def logout():
    cookie_session.pop("identity", None)
    return jsonify({"status": "logged out"})



@api_bp.route("/me", methods=["GET"])

def me():
    session = _require_session()
    response = session.to_dict()
    response["leaveBalance"] = get_balance(_store(), session)
    return jsonify(response)



@api_bp.route("/leave/applications", methods=["GET"])

def applications():
    session = _require_session()
    return jsonify([leave.to_dict() for leave in list_leaves(_store(), session)])



@api_bp.route("/leave/apply", methods=["POST"])

def apply_leave():
    session = _require_session()
    payload = _json_payload()
    start_date = payload.get("startDate")
    end_date = payload.get("endDate")
    reason = payload.get("reason")

    if not start_date or not end_date:
        raise LeaveError("'startDate' and 'endDate' are required in YYYY-MM-DD format")

    application = submit_leave(
        _store(),
        session,
        start_date=start_date,
        end_date=end_date,
        reason=reason,
    )
    return jsonify(application.to_dict()), 201



@api_bp.route("/leave/<int:leave_id>/decision", methods=["POST"])

def leave_decision(leave_id: int):
    session = _require_session()
    status = _decision_status()
    application = review_leave(_store(), session, leave_id=leave_id, status=status)
    return jsonify(application.to_dict())



@api_bp.route("/leave/at/<int:position>/decision", methods=["POST"])

def leave_decision_at(position: int):
    session = _require_session()
    status = _decision_status()
    application = review_leave_at(_store(), session, position=position, status=status)
    return jsonify(application.to_dict())


__all__ = ["api_bp"]
