"""A URL shortener web service backed by MySQL."""

from __future__ import annotations

import html
import json
import os
import random
import sys
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from http import HTTPStatus
from pathlib import Path
from typing import Any
from urllib.parse import urljoin
from wsgiref.simple_server import make_server

import pymysql
from dotenv import load_dotenv

CHARSET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
BASE_URL = "http://localhost:8081/"
KEY_LENGTH = 6
PORT = 8081


@dataclass(frozen=True)
class UrlRequest:
    """Body of a shorten request."""

    url: str = ""


@dataclass(frozen=True)
class UrlResponse:
    """Body of a successful shorten response."""

    key: str
    url: str
    short_url: str


def generate_key(n: int) -> str:
    """Return ``n`` random letters and digits."""
    if n < 0:
        raise ValueError("key length must not be negative")
    return "".join(random.choices(CHARSET, k=n))


class MySQLUrlStore:
    """Short keys and their URLs in the ``urls`` table."""

    def __init__(self, connection: Any) -> None:
        self._connection = connection

    def save_url(self, short_key: str, original_url: str) -> None:
        """Insert a new key and its URL."""
        with self._connection.cursor() as cursor:
            cursor.execute(
                "INSERT INTO urls(short_key, original_url) VALUES(%s, %s)",
                (short_key, original_url),
            )
        self._connection.commit()

    def get_url(self, short_key: str) -> str:
        """Return the URL stored for ``short_key``; LookupError if none."""
        with self._connection.cursor() as cursor:
            cursor.execute("SELECT original_url FROM urls WHERE short_key=%s", (short_key,))
            row = cursor.fetchone()
        if row is None:
            raise LookupError(f"no URL for key {short_key!r}")
        return row[0]


def connect_from_env(env_file: str | Path = ".env") -> MySQLUrlStore:
    """Open the database named by the DB_* settings in ``env_file``."""
    if not Path(env_file).is_file():
        raise RuntimeError("Error loading .env file")
    load_dotenv(env_file)
    port = os.environ.get("DB_PORT", "")
    password = os.environ.get("DB_PASS", "")
    connection = pymysql.connect(
        host=os.environ.get("DB_HOST") or "127.0.0.1",
        port=int(port) if port else 3306,
        user=os.environ.get("DB_USER", ""),
        password=password,
        database=os.environ.get("DB_NAME") or None,
        autocommit=True,
    )
    connection.ping(reconnect=False)
    return MySQLUrlStore(connection)


def _parse_request(body: bytes) -> UrlRequest:
    text = body.decode("utf-8", errors="replace").lstrip()
    data, _ = json.JSONDecoder().raw_decode(text)
    if data is None:
        return UrlRequest()
    if not isinstance(data, dict):
        raise ValueError("request body is not an object")
    url = data.get("url")
    if url is None:
        return UrlRequest()
    if not isinstance(url, str):
        raise ValueError("url must be a string")
    return UrlRequest(url)


class ShortenerApp:
    """WSGI application: POST /shorten, GET /<key> redirects."""

    def __init__(self, store: Any) -> None:
        self.store = store

    def __call__(
        self, environ: dict[str, Any], start_response: Callable[..., Any]
    ) -> Iterable[bytes]:
        path = environ.get("PATH_INFO") or "/"
        path = path.encode("latin-1").decode("utf-8", errors="replace")
        method = environ.get("REQUEST_METHOD", "GET")
        if path == "/shorten":
            return self._shorten(environ, method, start_response)
        return self._redirect(path, method, start_response)

    @staticmethod
    def _reply(start_response, code: int, headers: list, body: bytes) -> list[bytes]:
        start_response(f"{code} {HTTPStatus(code).phrase}", headers)
        return [body]

    def _error(self, start_response, code: int, message: str) -> list[bytes]:
        headers = [
            ("Content-Type", "text/plain; charset=utf-8"),
            ("X-Content-Type-Options", "nosniff"),
        ]
        return self._reply(start_response, code, headers, (message + "\n").encode("utf-8"))

    def _shorten(self, environ, method: str, start_response) -> list[bytes]:
        if method != "POST":
            return self._error(start_response, 405, "Method not allowed")
        try:
            length = int(environ.get("CONTENT_LENGTH") or 0)
        except ValueError:
            length = 0
        body = environ["wsgi.input"].read(length) if length > 0 else b""
        try:
            request = _parse_request(body)
        except ValueError:
            request = UrlRequest()
        if not request.url:
            return self._error(start_response, 400, "Bad request")

        key = generate_key(KEY_LENGTH)
        try:
            self.store.save_url(key, request.url)
        except Exception:
            return self._error(start_response, 500, "Internal server errorc")

        response = UrlResponse(key=key, url=request.url, short_url=BASE_URL + key)
        payload = {"key": response.key, "url": response.url, "shortUrl": response.short_url}
        text = json.dumps(payload, ensure_ascii=False, separators=(",", ":")) + "\n"
        headers = [("Content-Type", "application/json")]
        return self._reply(start_response, 200, headers, text.encode("utf-8"))

    def _redirect(self, path: str, method: str, start_response) -> list[bytes]:
        key = path[1:]
        if not key:
            return self._error(start_response, 404, "Not found")
        try:
            original = self.store.get_url(key)
        except Exception:
            return self._error(start_response, 404, "Url not found x")

        location = urljoin(path, original)
        headers = [("Location", location)]
        body = b""
        if method in ("GET", "HEAD"):
            headers.append(("Content-Type", "text/html; charset=utf-8"))
            if method == "GET":
                body = f'<a href="{html.escape(location)}">Found</a>.\n\n'.encode("utf-8")
        return self._reply(start_response, 302, headers, body)


def main(argv: Sequence[str] | None = None) -> int:
    """Connect to the database and serve the shortener on port 8081."""
    print("Starting server...")
    try:
        store = connect_from_env(".env")
    except Exception as exc:
        print(exc, file=sys.stderr)
        return 1
    print("Connected to database successfully", file=sys.stderr)
    try:
        with make_server("", PORT, ShortenerApp(store)) as server:
            server.serve_forever()
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())