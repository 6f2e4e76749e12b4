"""Small web services for categories and class notes."""

from __future__ import annotations

import json
import math
import sys
from collections.abc import Callable, Iterable, Sequence
from decimal import Decimal
from http import HTTPStatus
from typing import Any
from wsgiref.simple_server import WSGIRequestHandler, make_server

StartResponse = Callable[..., Any]
WSGIApp = Callable[[dict, StartResponse], Iterable[bytes]]

CATEGORIES_PORT = 8080
CLASSNOTES_PORT = 8081
TEST_SERVER_PORT = 8080


def is_super_admin(environ: dict[str, Any]) -> bool:
    """Role check; every caller is treated as a super admin for now."""
    return True


def _status(code: int) -> str:
    return f"{code} {HTTPStatus(code).phrase}"


def _text(start_response: StartResponse, text: str, code: int = 200) -> list[bytes]:
    start_response(_status(code), [("Content-Type", "text/plain; charset=utf-8")])
    return [text.encode("utf-8")]


def _error(start_response: StartResponse, message: str, code: int) -> list[bytes]:
    start_response(
        _status(code),
        [
            ("Content-Type", "text/plain; charset=utf-8"),
            ("X-Content-Type-Options", "nosniff"),
        ],
    )
    return [(message + "\n").encode("utf-8")]


def _not_found(start_response: StartResponse) -> list[bytes]:
    return _error(start_response, "404 page not found", 404)


def _request(environ: dict[str, Any]) -> tuple[str, str]:
    raw = environ.get("PATH_INFO", "") or "/"
    path = raw.encode("latin-1").decode("utf-8", errors="replace")
    return environ.get("REQUEST_METHOD", "GET"), path


def _read_body(environ: dict[str, Any]) -> bytes:
    try:
        length = int(environ.get("CONTENT_LENGTH") or 0)
    except ValueError:
        length = 0
    return environ["wsgi.input"].read(length) if length > 0 else b""


def categories_app(environ: dict[str, Any], start_response: StartResponse) -> list[bytes]:
    """Serve /categories with one reply per method."""
    method, path = _request(environ)
    if path != "/categories":
        return _not_found(start_response)
    replies = {
        "GET": "Listing all categories...\n",
        "POST": "Creating a category...\n",
        "PUT": "Updating a category...\n",
        "DELETE": "Deleting a category...\n",
    }
    if method not in replies:
        return _error(start_response, "Method Not Allowed", 405)
    return _text(start_response, replies[method])


def classnotes_app(environ: dict[str, Any], start_response: StartResponse) -> list[bytes]:
    """Serve /classnotes and /classnotes/<id>."""
    method, path = _request(environ)
    if path == "/classnotes":
        if method == "GET":
            return _text(start_response, "Showing all Class Notes\n")
        if method == "POST":
            return _text(start_response, "Classnote Added\n")
        return _error(start_response, "Method Not Allowed", 405)
    if path.startswith("/classnotes/"):
        if method != "GET":
            return _error(start_response, "Method Not Allowed", 405)
        parts = path.split("/")
        if len(parts) < 3 or not parts[2]:
            return _error(start_response, "Invalid or missing classnote ID", 400)
        return _text(start_response, f"Showing class note {parts[2]}\n")
    return _not_found(start_response)


def _strict_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"number {text} out of range")
    return value


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid literal {name}")


_DECODER = json.JSONDecoder(
    parse_float=_strict_float,
    parse_int=_strict_float,
    parse_constant=_reject_constant,
)


def _format_float(number: float) -> str:
    if number == 0:
        return "-0" if math.copysign(1.0, number) < 0 else "0"
    value = Decimal(repr(number)).normalize()
    sign, digits, exponent = value.as_tuple()
    magnitude = len(digits) + exponent - 1
    if magnitude < -4 or magnitude >= 21:
        mantissa = str(digits[0])
        rest = "".join(str(digit) for digit in digits[1:])
        if rest:
            mantissa += "." + rest
        exp_sign = "+" if magnitude >= 0 else "-"
        return f"{'-' if sign else ''}{mantissa}e{exp_sign}{abs(magnitude):02d}"
    return format(value, "f")


def _format_value(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, dict):
        items = " ".join(f"{key}:{_format_value(value[key])}" for key in sorted(value))
        return f"map[{items}]"
    if isinstance(value, list):
        return "[" + " ".join(_format_value(item) for item in value) + "]"
    return str(value)


def _decode_object(body: bytes) -> dict[str, Any]:
    text = body.decode("utf-8", errors="replace").lstrip(" \t\r\n")
    data, _ = _DECODER.raw_decode(text)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("JSON value is not an object")
    return data


def test_server_app(environ: dict[str, Any], start_response: StartResponse) -> list[bytes]:
    """Serve the archive's home page, categories and class notes."""
    method, path = _request(environ)
    if path == "/categories":
        if method != "GET":
            return _error(start_response, "Method not allowed", 405)
        return _text(start_response, "Categories list goes here\n")
    if path == "/categories/classnotes":
        if method == "GET":
            return _text(start_response, "All classnotes list goes here\n")
        if method == "POST":
            try:
                data = _decode_object(_read_body(environ))
            except ValueError:
                return _error(start_response, "Invalid JSON", 400)
            return _text(start_response, f"Received new classnote: {_format_value(data)}\n")
        return _error(start_response, "Method not allowed", 405)
    if path.startswith("/categories/classnotes/"):
        if method != "GET":
            return _error(start_response, "Method not allowed", 405)
        parts = path.split("/")
        if len(parts) < 4:
            return _error(start_response, "Invalid classnote ID", 400)
        return _text(start_response, f"Classnote details for ID: {parts[3]}\n")
    return _text(start_response, "Welcome to BGCE Archive!\n")


class _QuietHandler(WSGIRequestHandler):
    def log_message(self, format: str, *args: Any) -> None:
        pass


def serve(app: WSGIApp, port: int) -> None:
    """Serve ``app`` on all interfaces at ``port`` until interrupted."""
    with make_server("", port, app, handler_class=_QuietHandler) as server:
        server.serve_forever()


def _run(app: WSGIApp, port: int, banner: str) -> int:
    print(f"{banner} is running on http://localhost:{port}")
    try:
        serve(app, port)
    except OSError as exc:
        print("Error starting server:", exc)
    return 0


def main_categories(argv: Sequence[str] | None = None) -> int:
    """Start the categories service."""
    return _run(categories_app, CATEGORIES_PORT, "Categories service")


def main_classnotes(argv: Sequence[str] | None = None) -> int:
    """Start the class notes service."""
    return _run(classnotes_app, CLASSNOTES_PORT, "Classnotes service")


def main_test_server(argv: Sequence[str] | None = None) -> int:
    """Start the combined archive server."""
    return _run(test_server_app, TEST_SERVER_PORT, "Server")


if __name__ == "__main__":
    sys.exit(main_test_server())