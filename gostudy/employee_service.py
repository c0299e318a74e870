"""A small HTTP service: greetings, the time and an employee lookup."""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict, dataclass
from datetime import datetime
from http import HTTPStatus
from typing import Callable, Iterable
from wsgiref.simple_server import make_server

_TEXT = ("Content-Type", "text/plain; charset=utf-8")


class EmployeeNotFoundError(LookupError):
    """The requested employee is not in the directory."""


@dataclass(frozen=True)
class _StaffRecord:
    id: str
    name: str
    age: int


_EMPLOYEES: dict[str, _StaffRecord] = {
    "Mike": _StaffRecord("1", "Mike", 35),
    "Rose": _StaffRecord("2", "Rose", 30),
    "zhongxiao": _StaffRecord("2", "zhongxiao", 23),
}


def query_employee(name: str) -> str:
    """Return the JSON record of the employee called ``name``.

    Raises EmployeeNotFoundError when there is no such employee.
    """
    try:
        record = _EMPLOYEES[name]
    except KeyError:
        raise EmployeeNotFoundError("the employee not in DB!") from None
    return json.dumps(asdict(record), ensure_ascii=False, separators=(",", ":"))


def _employee_page(name: str) -> str:
    try:
        return query_employee(name)
    except EmployeeNotFoundError as err:
        return f"Not Found, error: {err}"


def _time_page() -> str:
    return f'{{"time": "{datetime.now().astimezone()}"}}'


def _handler(path: str) -> Callable[[], str] | None:
    if path == "/":
        return lambda: "Welcome!\n"
    if path == "/time/":
        return _time_page
    parts = path.split("/")
    if len(parts) == 3 and parts[0] == "" and parts[2]:
        resource, name = parts[1], parts[2]
        if resource == "hello":
            return lambda: f"Hello, {name}"
        if resource == "employees":
            return lambda: _employee_page(name)
    return None


def _status(code: HTTPStatus) -> str:
    return f"{code.value} {code.phrase}"


def _request_path(environ: dict) -> str:
    raw = environ.get("PATH_INFO") or "/"
    return raw.encode("latin-1").decode("utf-8", errors="replace")


def _redirect_target(path: str) -> str | None:
    if path.endswith("/") and len(path) > 1:
        candidate = path[:-1]
    else:
        candidate = path + "/"
    return candidate if _handler(candidate) is not None else None


def application(environ: dict, start_response: Callable) -> Iterable[bytes]:
    """WSGI entry point serving the GET routes of the service."""
    path = _request_path(environ)
    method = environ.get("REQUEST_METHOD", "GET")
    handler = _handler(path)

    if handler is None:
        target = _redirect_target(path)
        if target is not None and method == "GET":
            start_response(
                _status(HTTPStatus.MOVED_PERMANENTLY), [("Location", target), _TEXT]
            )
            return [b""]
        start_response(_status(HTTPStatus.NOT_FOUND), [_TEXT])
        return [b"404 page not found\n"]

    if method != "GET":
        start_response(
            _status(HTTPStatus.METHOD_NOT_ALLOWED), [("Allow", "GET"), _TEXT]
        )
        return [b"Method Not Allowed\n"]

    start_response(_status(HTTPStatus.OK), [_TEXT])
    return [handler().encode("utf-8")]


def main(argv: list[str] | None = None) -> int:
    """Serve the application until interrupted."""
    parser = argparse.ArgumentParser(description="Serve the employee service.")
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)
    with make_server(args.host, args.port, application) as server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())