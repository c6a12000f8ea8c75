from __future__ import annotations

from datetime import date

from flask import Flask, flash, render_template

from ..common.web import login_required
from ..core.exceptions import BackendUnavailableError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard", endpoint="dashboard")
    @login_required
    def dashboard():
        try:
            data = container.dashboard_service.build(date.today())
        except BackendUnavailableError as e:
            flash(str(e), "danger")
            data = None
        return render_template("dashboard.html", data=data, active_page="dashboard")
