"""Simple one-to-one TCP text messaging between a client and a server."""

from __future__ import annotations

import logging
import socket
import threading
import time
from typing import Optional

logger = logging.getLogger(__name__)

MESSAGE_BUFFER_SIZE = 1500
"""Size of the message buffer; a message must fit in it with a terminating NUL."""

EXIT_MESSAGE = "exit"
BACKLOG_SIZE = 5


def _encode(message: str) -> bytes:
    data = message.encode("utf-8").split(b"\0", 1)[0]
    if len(data) >= MESSAGE_BUFFER_SIZE:
        raise ValueError(
            f"Message of {len(data)} bytes does not fit in a {MESSAGE_BUFFER_SIZE}-byte buffer"
        )
    return data


def _decode(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


class TCPClient:
    """Client connected to a ``TCPServer`` on construction."""

    def __init__(self, server_ip: str, port: int) -> None:
        try:
            address = socket.gethostbyname(server_ip)
        except OSError as exc:
            raise ConnectionError(f"Error connecting to socket: cannot resolve {server_ip}") from exc

        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        logger.info("try to connect...")
        try:
            sock.connect((address, port))
        except OSError as exc:
            sock.close()
            raise ConnectionError("Error connecting to socket!") from exc
        logger.info("Connected to the server!")
        self._sock: Optional[socket.socket] = sock

    @property
    def closed(self) -> bool:
        return self._sock is None

    def __enter__(self) -> TCPClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def send_message(self, message: str) -> None:
        """Send ``message`` to the server."""
        if self._sock is None:
            raise ConnectionError("Connection is closed")
        self._sock.sendall(_encode(message))

    def receive_message(self) -> str:
        """Receive one message; ``"exit"`` from the server closes the connection.

        Returns an empty string once the connection is closed.
        """
        if self._sock is None:
            return ""
        message = _decode(self._sock.recv(MESSAGE_BUFFER_SIZE))
        if message == EXIT_MESSAGE:
            self.close()
            logger.info("Server has quit the session")
        return message

    def close(self) -> None:
        """Close the connection; harmless when already closed."""
        if self._sock is not None:
            self._sock.close()
            self._sock = None
            logger.info("Connection closed")


class TCPServer:
    """Server that accepts a single client and exchanges text messages with it.

    ``ready`` is set once the server listens; ``port`` then holds the bound port.
    """

    def __init__(self) -> None:
        self._listener: Optional[socket.socket] = None
        self._conn: Optional[socket.socket] = None
        self.port: Optional[int] = None
        self.ready = threading.Event()
        self.bytes_read = 0
        self.bytes_written = 0
        self.session_start: Optional[float] = None

    def __enter__(self) -> TCPServer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def start(self, port: int) -> None:
        """Listen on ``port`` on every interface and wait for one client."""
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        except OSError as exc:
            raise RuntimeError("Error establishing the server socket") from exc
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind(("", port))
            sock.listen(BACKLOG_SIZE)
        except OSError as exc:
            sock.close()
            raise RuntimeError("Error binding socket to local address") from exc

        self._listener = sock
        self.port = sock.getsockname()[1]
        self.ready.set()
        logger.info("Waiting for a client to connect...")
        try:
            conn, _address = sock.accept()
        except OSError as exc:
            raise RuntimeError("Error accepting request from client!") from exc
        logger.info("Connected with client!")

        self._conn = conn
        self.session_start = time.monotonic()
        self.bytes_read = 0
        self.bytes_written = 0

    def stop(self) -> None:
        """Close the client connection and the listening socket."""
        for sock in (self._listener, self._conn):
            if sock is not None:
                sock.close()
        self._listener = None
        self._conn = None
        self.ready.clear()

    def _connection(self) -> socket.socket:
        if self._conn is None:
            raise RuntimeError("No client is connected")
        return self._conn

    def send_message(self, message: str) -> None:
        """Send ``message`` to the client."""
        self.bytes_written += self._connection().send(_encode(message))

    def receive_message(self) -> str:
        """Receive one message; ``"exit"`` from the client stops the server."""
        data = self._connection().recv(MESSAGE_BUFFER_SIZE)
        self.bytes_read += len(data)
        message = _decode(data)
        if message == EXIT_MESSAGE:
            self.stop()
            return EXIT_MESSAGE
        logger.info("Received: %s", message)
        return message