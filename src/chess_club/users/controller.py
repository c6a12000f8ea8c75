from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..core.exceptions import AuthenticationError, BackendUnavailableError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    app.jinja_env.globals["csrf_token"] = lambda: ""

    @app.route("/", methods=["GET", "POST"], endpoint="login")
    def login():
        if "coach_id" in session:
            return redirect(url_for("dashboard"))

        if request.method == "POST":
            username = request.form.get("username", "")
            password = request.form.get("password", "")

            try:
                coach = container.auth_service.authenticate(username, password)

                session["coach_id"] = coach.coach_id
                session["name"] = coach.full_name

                flash("Logged in", "success")
                return redirect(url_for("dashboard"))
            except (AuthenticationError, BackendUnavailableError) as e:
                flash(str(e), "danger")
            except Exception:
                app.logger.exception("login failed")
                flash("System error while logging in", "danger")

        return render_template("login.html")

    @app.route("/logout", endpoint="logout")
    def logout():
        session.clear()
        flash("Logged out.", "info")
        return redirect(url_for("login"))
