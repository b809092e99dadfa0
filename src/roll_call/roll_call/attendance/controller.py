from __future__ import annotations

from functools import wraps

from flask import Flask, abort, flash, g, redirect, render_template, request, session, url_for

from ..common.validators import pick_division
from ..core.constants import SESSION_DIVISION, SESSION_SHOW_ENTRIES
from ..core.enums import AttendanceStatus
from ..container import Container
from .form import AttendanceForm


def register(app: Flask, container: Container) -> None:
    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if g.sessions.current_user is None:
                return redirect(url_for("index"))
            return view(*args, **kwargs)

        return wrapper

    def _load_form() -> AttendanceForm:
        return AttendanceForm(
            service=container.attendance_service,
            divisions=container.divisions,
            division=pick_division(session.get(SESSION_DIVISION), container.divisions, container.default_division),
            show_entries=bool(session.get(SESSION_SHOW_ENTRIES, False)),
        )

    def _render(form: AttendanceForm):
        """Persist the form's sticky state and render it.

        The listing is fetched here only when the entries panel is visible.
        """
        if form.show_entries:
            form.ensure_loaded()
        session[SESSION_DIVISION] = form.division
        session[SESSION_SHOW_ENTRIES] = form.show_entries
        for category, message in form.notices:
            flash(message, category)
        return render_template(
            "attendance.html",
            form=form,
            divisions=container.divisions,
            statuses=list(AttendanceStatus),
            data=form.rows_ui() if form.show_entries else [],
        )

    @app.route("/attendance", endpoint="attendance")
    @login_required
    def attendance():
        form = _load_form()
        form.refresh()
        return _render(form)

    @app.route("/attendance/division", methods=["POST"], endpoint="select_division")
    @login_required
    def select_division():
        form = _load_form()
        form.select_division(request.form.get("division"))
        return _render(form)

    @app.route("/attendance/mark", methods=["POST"], endpoint="mark_attendance")
    @login_required
    def mark_attendance():
        try:
            status = AttendanceStatus(request.form.get("status", ""))
        except ValueError:
            abort(400)

        form = _load_form()
        form.enrollment = request.form.get("enrollment", "")
        try:
            form.mark(status, g.sessions.current_user)
        except Exception:
            app.logger.exception("mark attendance failed")
            form.notices.append(("danger", container.attendance_service.MARK_FAILED))
        return _render(form)

    @app.route("/attendance/entries/toggle", methods=["POST"], endpoint="toggle_entries")
    @login_required
    def toggle_entries():
        form = _load_form()
        form.toggle_entries()
        return _render(form)
