from __future__ import annotations

from typing import Iterable, Sequence, Tuple

from jinja2 import Environment, PackageLoader, select_autoescape

from ..core import constants
from ..core.enums import AttendanceStatus
from ..employees.model import Employee
from .state import ViewState

_env = Environment(
    loader=PackageLoader("hrms_lite", "templates"),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_view(state: ViewState, *, messages: Iterable[Tuple[str, str]] = ()) -> str:
    """Render the whole screen for `state`. No side effects."""
    if state.loading:
        template = "loading.html"
    elif state.is_fatal:
        template = "error.html"
    else:
        template = "index.html"
    return _env.get_template(template).render(
        state=state,
        messages=list(messages),
        statuses=list(AttendanceStatus),
        c=constants,
    )


def render_confirm_delete(employee: Employee, *, messages: Sequence[Tuple[str, str]] = ()) -> str:
    return _env.get_template("confirm_delete.html").render(
        employee=employee,
        messages=list(messages),
        c=constants,
    )
