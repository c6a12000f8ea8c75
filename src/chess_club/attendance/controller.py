from __future__ import annotations

from datetime import date

from flask import Flask, flash, jsonify, redirect, render_template, request, url_for

from ..common.datetime_utils import is_club_day, parse_iso_date, target_session_date
from ..common.validators import require_upcoming_club_day
from ..common.web import login_required
from ..core.enums import AttendanceAction
from ..core.exceptions import BackendUnavailableError, DomainError, ValidationError
from ..container import Container

_ACTION_LABELS = {
    AttendanceAction.CHECK_IN: "check in",
    AttendanceAction.CHECK_OUT: "check out",
}


def register(app: Flask, container: Container) -> None:
    def _session_date(*, for_write: bool = False) -> date:
        # Forms carry the date the page was rendered for, so one interaction uses one date.
        today = date.today()
        value = request.values.get("session_date")
        if not value:
            return target_session_date(today)
        try:
            day = parse_iso_date(value)
        except ValueError:
            raise ValidationError("Invalid date (YYYY-MM-DD)")
        if for_write:
            require_upcoming_club_day(day, today)
        return day

    def _student_label(student_id: int) -> str:
        try:
            student = container.students_repo.get_by_id(student_id)
        except BackendUnavailableError:
            student = None
        return student.full_name if student else f"student #{student_id}"

    def _success_message(action: AttendanceAction, state) -> str:
        if action == AttendanceAction.CHECK_IN:
            return "Student checked in" if state.checked_in else "Check-in removed"
        return "Student checked out" if state.checked_out else "Check-out removed"

    def _serialize(entry) -> dict:
        s = entry.student
        return {
            "student_id": s.student_id,
            "first_name": s.first_name,
            "last_name": s.last_name,
            "grade": s.grade,
            "teacher": s.teacher,
            "checked_in": entry.checked_in,
            "checked_out": entry.checked_out,
        }

    @app.route("/attendance", endpoint="attendance")
    @login_required
    def attendance():
        query = request.args.get("q", "")
        view = None
        try:
            view = container.attendance_service.roster_for(_session_date(), query=query)
        except DomainError as e:
            flash(str(e), "danger")
        return render_template(
            "attendance.html",
            view=view,
            query=query,
            is_today=is_club_day(date.today()),
            active_page="attendance",
        )

    def _toggle(student_id: int, action: AttendanceAction):
        session_date = None
        try:
            session_date = _session_date(for_write=True)
            state = container.attendance_service.toggle(student_id, action, session_date)
            flash(_success_message(action, state), "success")
        except DomainError as e:
            flash(f"Failed to {_ACTION_LABELS[action]} {_student_label(student_id)}: {e}", "warning")
        except Exception:
            app.logger.exception("attendance %s failed for student %s", action.value, student_id)
            flash(f"System error while trying to {_ACTION_LABELS[action]} {_student_label(student_id)}", "danger")

        args = {"session_date": session_date.isoformat()} if session_date else {}
        return redirect(url_for("attendance", **args))

    @app.route("/attendance/<int:student_id>/checkin", methods=["POST"], endpoint="attendance_checkin")
    @login_required
    def attendance_checkin(student_id: int):
        return _toggle(student_id, AttendanceAction.CHECK_IN)

    @app.route("/attendance/<int:student_id>/checkout", methods=["POST"], endpoint="attendance_checkout")
    @login_required
    def attendance_checkout(student_id: int):
        return _toggle(student_id, AttendanceAction.CHECK_OUT)

    @app.route("/attendance/<int:student_id>/reset", methods=["POST"], endpoint="attendance_reset")
    @login_required
    def attendance_reset(student_id: int):
        session_date = None
        try:
            session_date = _session_date(for_write=True)
            container.attendance_service.remove_record(student_id, session_date)
            flash(f"Attendance record removed for {_student_label(student_id)}", "success")
        except DomainError as e:
            flash(f"Failed to remove record for {_student_label(student_id)}: {e}", "warning")
        except Exception:
            app.logger.exception("attendance reset failed for student %s", student_id)
            flash(f"System error while trying to remove the record for {_student_label(student_id)}", "danger")

        args = {"session_date": session_date.isoformat()} if session_date else {}
        return redirect(url_for("attendance", **args))

    @app.route("/api/attendance", endpoint="api_attendance")
    @login_required
    def api_attendance():
        try:
            view = container.attendance_service.roster_for(_session_date(), query=request.args.get("q", ""))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except BackendUnavailableError as e:
            return jsonify({"success": False, "message": str(e)}), 503

        return jsonify(
            {
                "success": True,
                "session_date": view.session_date.isoformat(),
                "students": [_serialize(e) for e in view.entries],
                "stats": {
                    "totalStudents": view.stats.total_students,
                    "presentToday": view.stats.present_today,
                    "attendanceRate": view.stats.attendance_rate,
                },
            }
        )
