from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.web import login_required
from ..core.constants import GRADES
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/students", endpoint="students")
    @login_required
    def students():
        grade_s = request.args.get("grade", "all")
        query = request.args.get("q", "")
        groups = []
        try:
            grade = None if grade_s in ("", "all") else grade_s
            groups = container.student_service.directory(grade=grade, search=query)
        except DomainError as e:
            flash(str(e), "danger")

        return render_template(
            "students/directory.html",
            groups=groups,
            grades=GRADES,
            selected_grade=grade_s,
            query=query,
            active_page="students",
        )

    @app.route("/students/add", methods=["GET", "POST"], endpoint="add_student")
    @login_required
    def add_student():
        if request.method == "POST":
            try:
                container.student_service.register(
                    first_name=request.form.get("first_name", ""),
                    last_name=request.form.get("last_name", ""),
                    grade=request.form.get("grade"),
                    teacher=request.form.get("teacher", ""),
                )
                flash("Student registered!", "success")
                return redirect(url_for("students"))
            except DomainError as e:
                flash(str(e), "danger")
            except Exception:
                app.logger.exception("student registration failed")
                flash("System error while registering student", "danger")

        return render_template("students/add.html", grades=GRADES, active_page="add_student")

    @app.route("/students/<int:student_id>/active", methods=["POST"], endpoint="student_set_active")
    @login_required
    def student_set_active(student_id: int):
        active = request.form.get("active") == "1"
        try:
            container.student_service.set_active(student_id, active=active)
            flash("Student updated.", "success")
        except DomainError as e:
            flash(str(e), "danger")
        return redirect(url_for("students"))
