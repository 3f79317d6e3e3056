"""Threaded HTTP server that routes requests to registered handlers."""

from __future__ import annotations

import ipaddress
import itertools
import queue
import selectors
import socket
import threading
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Union

from ev3finder.http_message import (
    HttpMethod,
    HttpRequest,
    HttpResponse,
    HttpStatusCode,
    HttpVersionNotSupportedError,
    parse_request,
    response_to_string,
)
from ev3finder.uri import Uri

MAX_BUFFER_SIZE = 4096
"""Largest message, in bytes, read or written on a connection at a time."""

BACKLOG_SIZE = 1000
THREAD_POOL_SIZE = 5

_POLL_INTERVAL = 0.05

RequestHandler = Callable[[HttpRequest], HttpResponse]


@dataclass
class _Connection:
    sock: socket.socket
    pending: bytes = b""


class _Worker:
    """Serves the connections handed to it on its own thread."""

    def __init__(self, server: HttpServer) -> None:
        self._server = server
        self._selector = selectors.DefaultSelector()
        self._incoming: "queue.SimpleQueue[socket.socket]" = queue.SimpleQueue()
        self._thread = threading.Thread(target=self._run, daemon=True)

    def start(self) -> None:
        self._thread.start()

    def join(self) -> None:
        self._thread.join()

    def adopt(self, client: socket.socket) -> None:
        self._incoming.put(client)

    def _register_incoming(self) -> None:
        while True:
            try:
                client = self._incoming.get_nowait()
            except queue.Empty:
                return
            self._selector.register(client, selectors.EVENT_READ, _Connection(client))

    def _run(self) -> None:
        try:
            while self._server.running:
                self._register_incoming()
                if not self._selector.get_map():
                    self._server._stopping.wait(_POLL_INTERVAL)
                    continue
                for key, _events in self._selector.select(timeout=_POLL_INTERVAL):
                    self._service(key.data)
        finally:
            self._register_incoming()
            for key in list(self._selector.get_map().values()):
                self._drop(key.data)
            self._selector.close()

    def _service(self, conn: _Connection) -> None:
        try:
            if conn.pending:
                sent = conn.sock.send(conn.pending)
                conn.pending = conn.pending[sent:]
                if not conn.pending:
                    self._selector.modify(conn.sock, selectors.EVENT_READ, conn)
            else:
                chunk = conn.sock.recv(MAX_BUFFER_SIZE)
                if not chunk:
                    self._drop(conn)
                    return
                conn.pending = self._server.handle_data(chunk)
                self._selector.modify(conn.sock, selectors.EVENT_WRITE, conn)
        except (BlockingIOError, InterruptedError):
            return
        except OSError:
            self._drop(conn)

    def _drop(self, conn: _Connection) -> None:
        try:
            self._selector.unregister(conn.sock)
        except (KeyError, ValueError):
            pass
        conn.sock.close()


class HttpServer:
    """HTTP/1.1 server with one listener thread and a pool of worker threads.

    Handlers are looked up by request path (case-insensitive) and method.
    """

    def __init__(self, host: str = "", port: int = 0) -> None:
        self.host = host
        self._port = port
        self._handlers: Dict[Uri, Dict[HttpMethod, RequestHandler]] = {}
        self._stopping = threading.Event()
        self._running = False
        self._socket: Optional[socket.socket] = None
        self._listener: Optional[threading.Thread] = None
        self._workers: List[_Worker] = []

    @property
    def port(self) -> int:
        """Port the server listens on; the bound port once started."""
        return self._port

    @property
    def running(self) -> bool:
        return self._running

    def __enter__(self) -> HttpServer:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def register_handler(
        self, path: Union[str, Uri], method: HttpMethod, handler: RequestHandler
    ) -> None:
        """Register ``handler`` for ``path`` and ``method``.

        The first handler registered for a path and method is kept.
        """
        uri = path if isinstance(path, Uri) else Uri(path)
        self._handlers.setdefault(uri, {}).setdefault(method, handler)

    def handle_request(self, request: HttpRequest) -> HttpResponse:
        """Dispatch a parsed request to its handler."""
        methods = self._handlers.get(request.uri)
        if methods is None:
            return HttpResponse(HttpStatusCode.NOT_FOUND)
        handler = methods.get(request.method)
        if handler is None:
            return HttpResponse(HttpStatusCode.METHOD_NOT_ALLOWED)
        return handler(request)

    def handle_data(self, data: Union[bytes, str]) -> bytes:
        """Turn raw request data into the raw response to send back.

        Data after a NUL byte is ignored and the response is cut to
        ``MAX_BUFFER_SIZE`` bytes.
        """
        text = data.decode("utf-8", errors="replace") if isinstance(data, bytes) else data
        text = text.split("\0", 1)[0]

        method = HttpMethod.GET
        try:
            request = parse_request(text)
            method = request.method
            response = self.handle_request(request)
        except HttpVersionNotSupportedError as exc:
            response = HttpResponse(HttpStatusCode.HTTP_VERSION_NOT_SUPPORTED)
            response.set_content(str(exc))
        except ValueError as exc:
            response = HttpResponse(HttpStatusCode.BAD_REQUEST)
            response.set_content(str(exc))
        except Exception as exc:
            response = HttpResponse(HttpStatusCode.INTERNAL_SERVER_ERROR)
            response.set_content(str(exc))

        wire = response_to_string(response, method is not HttpMethod.HEAD)
        return wire.encode("utf-8")[:MAX_BUFFER_SIZE]

    def start(self) -> None:
        """Bind, listen and start the listener and worker threads."""
        if self._running:
            raise RuntimeError("Server is already running")

        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        except OSError as exc:
            raise RuntimeError("Failed to create a TCP socket") from exc

        try:
            try:
                sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
                if hasattr(socket, "SO_REUSEPORT"):
                    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEPORT, 1)
            except OSError as exc:
                raise RuntimeError("Failed to set socket options") from exc
            try:
                sock.bind((self._bind_address(), self._port))
            except OSError as exc:
                raise RuntimeError("Failed to bind to socket") from exc
            try:
                sock.listen(BACKLOG_SIZE)
            except OSError as exc:
                raise RuntimeError(f"Failed to listen on port {self._port}") from exc
        except RuntimeError:
            sock.close()
            raise

        sock.settimeout(_POLL_INTERVAL)
        self._port = sock.getsockname()[1]
        self._socket = sock
        self._stopping.clear()
        self._running = True

        self._workers = [_Worker(self) for _ in range(THREAD_POOL_SIZE)]
        for worker in self._workers:
            worker.start()
        self._listener = threading.Thread(target=self._listen, daemon=True)
        self._listener.start()

    def stop(self) -> None:
        """Stop all threads and close every socket; harmless when not running."""
        if not self._running:
            return
        self._running = False
        self._stopping.set()
        if self._listener is not None:
            self._listener.join()
            self._listener = None
        for worker in self._workers:
            worker.join()
        self._workers = []
        if self._socket is not None:
            self._socket.close()
            self._socket = None

    def _bind_address(self) -> str:
        try:
            return str(ipaddress.IPv4Address(self.host))
        except ValueError:
            return ""

    def _listen(self) -> None:
        assert self._socket is not None
        workers = itertools.cycle(self._workers)
        while self._running:
            try:
                client, _address = self._socket.accept()
            except socket.timeout:
                continue
            except OSError:
                self._stopping.wait(_POLL_INTERVAL)
                continue
            client.setblocking(False)
            next(workers).adopt(client)