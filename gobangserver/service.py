"""HTTP service for account registration and login."""

from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass
from http.server import BaseHTTPRequestHandler, HTTPServer
from urllib.parse import urlsplit

from .users import DatabaseError, UserDatabase

log = logging.getLogger(__name__)

_ROOT_BODY = b'{"info":"Hello QGobang Service"}'


@dataclass(frozen=True)
class Response:
    """An HTTP response produced by the service."""

    status: int = 200
    body: bytes = b""
    content_type: str = "application/json"

    @classmethod
    def from_json(cls, obj, status: int = 200) -> "Response":
        body = json.dumps(obj, separators=(",", ":"), sort_keys=True).encode("utf-8")
        return cls(status, body, "application/json")

    def json(self):
        return json.loads(self.body)


_BAD_REQUEST = Response(400, b"", "text/plain")
_NOT_FOUND = Response(404, b"", "text/plain")


def _credentials(body: bytes) -> tuple[str, str] | None:
    try:
        doc = json.loads(body)
    except ValueError:
        return None
    if not isinstance(doc, dict):
        return None
    name = doc.get("name")
    password = doc.get("password")
    return (
        name if isinstance(name, str) else "",
        password if isinstance(password, str) else "",
    )


class HttpService:
    """Routes HTTP requests to the user database."""

    def __init__(self, database: UserDatabase):
        self.database = database
        self._server: HTTPServer | None = None
        self._serving = False
        self._lock = threading.Lock()
        self._routes = {
            ("GET", "/"): self._root,
            ("POST", "/register"): self.register_user,
            ("POST", "/login"): self.register_user,
        }

    @property
    def is_running(self) -> bool:
        return self._server is not None

    @property
    def server_address(self) -> tuple:
        if self._server is None:
            raise RuntimeError("service is not listening")
        return self._server.server_address

    def _root(self, body: bytes) -> Response:
        return Response(200, _ROOT_BODY, "text/plain")

    def dispatch(self, method: str, path: str, body: bytes = b"") -> Response:
        """Answer one request."""
        handler = self._routes.get((method.upper(), urlsplit(path).path))
        if handler is None:
            return _NOT_FOUND
        return handler(body)

    def register_user(self, body: bytes) -> Response:
        """Register the user named in a JSON body; code is -1, 0 or 1."""
        creds = _credentials(body)
        if creds is None:
            return _BAD_REQUEST
        name, password = creds
        try:
            code = 1 if self.database.add_user(name, password) else 0
        except DatabaseError as exc:
            log.warning("registration failed: %s", exc)
            code = -1
        return Response.from_json({"code": code})

    def login(self, body: bytes) -> Response:
        """Check the credentials in a JSON body and report the user."""
        creds = _credentials(body)
        if creds is None:
            return _BAD_REQUEST
        name, password = creds
        try:
            info = self.database.get_user(name)
        except DatabaseError as exc:
            log.warning("login failed: %s", exc)
            info = None
        if info is None or info.password != password:
            return Response.from_json({"code": 0})
        return Response.from_json(
            {"code": 1, "uid": info.uid, "name": info.name, "level": info.level}
        )

    def listen(self, host: str, port: int) -> None:
        """Bind to host and port; raises OSError if that fails."""
        with self._lock:
            if self._server is not None:
                raise RuntimeError("service is already listening")
            self._server = HTTPServer((host, port), _make_handler(self))

    def serve_forever(self) -> None:
        """Handle requests until stop() is called."""
        with self._lock:
            server = self._server
            if server is None:
                raise RuntimeError("service is not listening")
            self._serving = True
        try:
            server.serve_forever()
        finally:
            with self._lock:
                self._serving = False

    def stop(self) -> None:
        """Stop serving and close the listening socket."""
        with self._lock:
            server = self._server
            self._server = None
            serving = self._serving
        if server is None:
            return
        if serving:
            server.shutdown()
        server.server_close()


def _make_handler(service: HttpService):
    class _Handler(BaseHTTPRequestHandler):
        def _handle(self):
            try:
                length = int(self.headers.get("Content-Length") or 0)
            except ValueError:
                response = _BAD_REQUEST
            else:
                body = self.rfile.read(length) if length > 0 else b""
                response = service.dispatch(self.command, self.path, body)
            self.send_response(response.status)
            self.send_header("Content-Type", response.content_type)
            self.send_header("Content-Length", str(len(response.body)))
            self.end_headers()
            self.wfile.write(response.body)

        do_GET = do_POST = do_PUT = do_DELETE = do_PATCH = _handle

        def log_message(self, format, *args):
            log.debug("%s - %s", self.address_string(), format % args)

    return _Handler