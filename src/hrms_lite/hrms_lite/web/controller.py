from __future__ import annotations

from flask import Flask, flash, get_flashed_messages, redirect, request, session, url_for

from ..container import Container
from ..core.constants import EMPLOYEE_FORM_FIELDS
from ..core.enums import ScreenPhase
from ..view.controller import ViewController
from ..view.render import render_confirm_delete


def flash_alert(message: str) -> None:
    flash(message, "danger")


def register(app: Flask, container: Container) -> None:
    def current_screen() -> ViewController:
        # Each browser session owns its own screen state.
        screen_id, screen = container.screens.get(session.get("screen_id"))
        session["screen_id"] = screen_id
        return screen

    def messages():
        return get_flashed_messages(with_categories=True)

    def apply_form_fields(screen: ViewController) -> None:
        for name in EMPLOYEE_FORM_FIELDS:
            if name in request.form:
                screen.update_form(name, request.form.get(name, ""))

    @app.route("/", endpoint="index")
    def index():
        screen = current_screen()
        # A browser reload of a screen that never loaded starts it over.
        if screen.state.phase in (ScreenPhase.UNINITIALIZED, ScreenPhase.ERROR):
            screen.start()
        return screen.render(messages=messages())

    @app.route("/reload", methods=["POST"], endpoint="reload")
    def reload():
        screen = current_screen()
        if not screen.state.is_fatal:
            screen.load_employees()
        return redirect(url_for("index"))

    @app.route("/employees/form", methods=["POST"], endpoint="update_form")
    def update_form():
        apply_form_fields(current_screen())
        return redirect(url_for("index"))

    @app.route("/employees", methods=["POST"], endpoint="add_employee")
    def add_employee():
        screen = current_screen()
        apply_form_fields(screen)
        if screen.add_employee():
            flash("Employee added.", "success")
        return redirect(url_for("index"))

    @app.route("/employees/<employee_pk>/delete", methods=["GET"], endpoint="confirm_delete")
    def confirm_delete(employee_pk: str):
        employee = current_screen().find_employee(employee_pk)
        if employee is None:
            flash("Employee not found", "warning")
            return redirect(url_for("index"))
        return render_confirm_delete(employee, messages=messages())

    @app.route("/employees/<employee_pk>/delete", methods=["POST"], endpoint="delete_employee")
    def delete_employee(employee_pk: str):
        screen = current_screen()
        employee = screen.find_employee(employee_pk)
        if employee is None:
            flash("Employee not found", "warning")
            return redirect(url_for("index"))

        confirmed = request.form.get("confirm") == "yes"
        if screen.delete_employee(employee.id, confirm=lambda _prompt: confirmed):
            flash("Employee deleted.", "success")
        return redirect(url_for("index"))

    @app.route("/employees/<employee_pk>/attendance", methods=["POST"], endpoint="select_employee")
    def select_employee(employee_pk: str):
        current_screen().select_employee_by_pk(employee_pk)
        return redirect(url_for("index"))

    @app.route("/attendance/mark", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        current_screen().mark_attendance(request.form.get("status", ""))
        return redirect(url_for("index"))
