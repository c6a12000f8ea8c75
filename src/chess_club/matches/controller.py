from __future__ import annotations

from datetime import date

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.datetime_utils import parse_iso_date
from ..common.web import login_required
from ..core.enums import MatchResult
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/matches", methods=["GET", "POST"], endpoint="matches")
    @login_required
    def matches():
        if request.method == "POST":
            try:
                played_on_s = request.form.get("played_on") or date.today().strftime("%Y-%m-%d")
                container.match_service.record_match(
                    white_student_id=int(request.form.get("white_student_id") or 0),
                    black_student_id=int(request.form.get("black_student_id") or 0),
                    result=request.form.get("result", ""),
                    played_on=parse_iso_date(played_on_s),
                )
                flash("Match recorded!", "success")
                return redirect(url_for("matches"))
            except DomainError as e:
                flash(str(e), "danger")
            except ValueError:
                flash("Invalid match form", "danger")

        recent, stats, students = [], None, []
        try:
            recent = container.match_service.recent_matches()
            stats = container.match_service.achievement_stats()
            students = container.students_repo.list_active()
        except DomainError as e:
            flash(str(e), "danger")

        return render_template(
            "matches.html",
            recent=recent,
            stats=stats,
            students=students,
            results=list(MatchResult),
            active_page="matches",
        )
