"""Constants and defaults.

Note: Keep user-facing strings here so the reducer, renderer and routes agree.
"""

DEFAULT_API_TIMEOUT_SECONDS = 10.0

LOAD_EMPLOYEES_FAILED = "Failed to fetch employees"
REQUEST_FAILED = "Request failed"
DELETE_CONFIRM_PROMPT = "Are you sure you want to delete this employee?"

EMPTY_EMPLOYEES_MESSAGE = "No employees yet."
EMPTY_ATTENDANCE_MESSAGE = "No records yet."
LOADING_MESSAGE = "Loading..."

EMPLOYEE_FORM_FIELDS = ("employee_id", "full_name", "email", "department")
