from __future__ import annotations

from flask import Flask, flash, g, redirect, render_template, request, session, url_for

from ..core.enums import AttendanceView
from ..core.exceptions import AuthenticationError, BackendError, RegistrationError
from ..container import Container
from ..database.connection import close_client
from .session import SessionManager


def register(app: Flask, container: Container) -> None:
    @app.before_request
    def load_session():
        if request.endpoint == "static":
            return None
        g.sessions = SessionManager(container.auth_gateway, session)
        g.sessions.load()
        return None

    @app.teardown_request
    def close_session(_exc=None):
        sessions = g.pop("sessions", None)
        if sessions is not None:
            sessions.close()
        client = g.pop("supabase", None)
        if client is not None:
            close_client(client)

    @app.context_processor
    def inject_user():
        sessions = g.get("sessions")
        return {"current_user": sessions.current_user if sessions else None}

    @app.route("/", endpoint="index")
    def index():
        if g.sessions.view == AttendanceView.ATTENDANCE:
            return redirect(url_for("attendance"))
        if g.sessions.view == AttendanceView.REGISTER:
            return render_template("register.html")
        return render_template("login.html")

    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        if request.method == "GET":
            g.sessions.show(AttendanceView.LOGIN)
            return redirect(url_for("index"))

        email = request.form.get("email", "")
        password = request.form.get("password", "")
        try:
            auth_session = container.auth_service.login(email, password)
        except AuthenticationError as e:
            flash(str(e), "danger")
            return render_template("login.html", email=email)
        except Exception:
            app.logger.exception("login failed")
            flash(container.auth_service.LOGIN_FAILED, "danger")
            return render_template("login.html", email=email)

        g.sessions.establish(auth_session)
        session.permanent = True
        flash("Logged in successfully", "success")
        return redirect(url_for("attendance"))

    @app.route("/register", methods=["GET", "POST"], endpoint="register")
    def register_user():
        if request.method == "GET":
            g.sessions.show(AttendanceView.REGISTER)
            return redirect(url_for("index"))

        email = request.form.get("email", "")
        password = request.form.get("password", "")
        try:
            container.auth_service.register(email, password)
        except RegistrationError as e:
            flash(str(e), "danger")
            return render_template("register.html", email=email)
        except Exception:
            app.logger.exception("registration failed")
            flash(container.auth_service.REGISTRATION_FAILED, "danger")
            return render_template("register.html", email=email)

        g.sessions.show(AttendanceView.LOGIN)
        flash("Registration successful! Please check your email.", "success")
        return redirect(url_for("index"))

    @app.route("/logout", endpoint="logout")
    def logout():
        if g.sessions.current_user is not None:
            try:
                container.auth_service.logout()
            except BackendError:
                app.logger.warning("sign-out failed; clearing local session anyway")
        g.sessions.clear()
        flash("Logged out successfully", "success")
        return redirect(url_for("index"))
