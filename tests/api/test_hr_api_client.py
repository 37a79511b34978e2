from __future__ import annotations

import json

import pytest
import requests

from hrms_lite.api.client import HrApiClient
from hrms_lite.api.connection import ApiConfig, HttpConnection
from hrms_lite.core.enums import AttendanceStatus
from hrms_lite.core.exceptions import ApiError
from hrms_lite.employees.model import EmployeeForm


def make_response(status_code: int, body=None) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    resp.encoding = "utf-8"
    resp._content = b"" if body is None else json.dumps(body).encode("utf-8")
    return resp


class FakeSession:
    def __init__(self, *responses):
        self._responses = list(responses)
        self.sent: list[dict] = []

    def request(self, method, url, json=None, timeout=None):
        self.sent.append({"method": method, "url": url, "json": json, "timeout": timeout})
        item = self._responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def close(self):
        pass


def client_for(*responses):
    session = FakeSession(*responses)
    conn = HttpConnection(ApiConfig(base_url="http://hr.test/api/", timeout=3.0), session=session)
    return HrApiClient(conn), session


def test_list_employees_maps_rows_in_order():
    client, session = client_for(
        make_response(
            200,
            [
                {"id": 7, "employee_id": "E7", "full_name": "Ann", "email": "a@x.io", "department": "Ops"},
                {"id": 3, "employee_id": "E3", "full_name": "Ben", "email": "b@x.io", "department": "IT"},
            ],
        )
    )

    employees = client.list_employees()

    assert [e.id for e in employees] == [7, 3]
    assert employees[0].full_name == "Ann"
    assert session.sent[0] == {"method": "GET", "url": "http://hr.test/api/employees", "json": None, "timeout": 3.0}


def test_create_employee_posts_form_fields():
    client, session = client_for(
        make_response(201, {"id": 9, "employee_id": "E9", "full_name": "Cy", "email": "c@x.io", "department": "HR"})
    )
    form = EmployeeForm(employee_id="E9", full_name="Cy", email="c@x.io", department="HR")

    created = client.create_employee(form)

    assert created.id == 9
    assert session.sent[0]["method"] == "POST"
    assert session.sent[0]["json"] == form.to_payload()


def test_delete_accepts_empty_body():
    client, session = client_for(make_response(204))

    client.delete_employee(5)

    assert session.sent[0]["method"] == "DELETE"
    assert session.sent[0]["url"].endswith("/employees/5")


def test_mark_attendance_sends_date_and_status():
    client, session = client_for(make_response(201, {"id": 1, "employee": 5, "date": "2025-03-14", "status": "Absent"}))

    rec = client.mark_attendance(5, date="2025-03-14", status=AttendanceStatus.ABSENT)

    assert rec.status == AttendanceStatus.ABSENT
    assert session.sent[0]["url"].endswith("/employees/5/attendance")
    assert session.sent[0]["json"] == {"date": "2025-03-14", "status": "Absent"}


def test_list_attendance_fills_missing_employee_reference():
    client, _ = client_for(make_response(200, [{"id": 1, "date": "2025-03-14", "status": "Present"}]))

    records = client.list_attendance(5)

    assert records[0].employee == 5


@pytest.mark.parametrize(
    "body, expected",
    [
        ({"detail": "Employee ID already exists"}, "Employee ID already exists"),
        ({"detail": [{"loc": ["body", "email"], "msg": "value is not a valid email address"}]},
         "value is not a valid email address"),
        ({"message": "Bad input"}, "Bad input"),
        ({"error": "Nope"}, "Nope"),
        (None, "Request failed with status 400"),
    ],
)
def test_failure_message_is_extracted(body, expected):
    client, _ = client_for(make_response(400, body))

    with pytest.raises(ApiError) as exc:
        client.create_employee(EmployeeForm("E1", "A", "a@x.io", "Ops"))

    assert str(exc.value) == expected
    assert exc.value.status_code == 400


def test_transport_error_becomes_api_error():
    client, _ = client_for(requests.ConnectionError("network unreachable"))

    with pytest.raises(ApiError, match="network unreachable"):
        client.list_employees()


def test_unknown_status_is_rejected():
    client, _ = client_for(make_response(200, [{"id": 1, "date": "2025-03-14", "status": "Late"}]))

    with pytest.raises(ApiError):
        client.list_attendance(1)


def test_container_close_closes_http_session():
    from hrms_lite.container import build_container

    session = requests.Session()
    closed = []
    session.close = lambda: closed.append(True)

    container = build_container(api_config={"base_url": "http://hr.test"}, session=session)
    container.close()

    assert closed == [True]
