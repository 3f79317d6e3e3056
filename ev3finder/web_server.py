"""Web interface of the robot: a small HTML status page."""

from __future__ import annotations

import logging
from typing import Optional

from ev3finder.http_message import HttpMethod, HttpRequest, HttpResponse, HttpStatusCode
from ev3finder.http_server import HttpServer
from ev3finder.web_components import FullBody

logger = logging.getLogger(__name__)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080


class WebServer:
    """Serves ``/hello`` as plain text and ``/`` as the rendered page body.

    Failures while starting or stopping are logged rather than raised.
    """

    def __init__(
        self,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        full_body: Optional[FullBody] = None,
    ) -> None:
        self.server = HttpServer(host, port)
        self.full_body = full_body if full_body is not None else FullBody()

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        """Port the server listens on; the bound port once started."""
        return self.server.port

    @property
    def running(self) -> bool:
        return self.server.running

    def __enter__(self) -> WebServer:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def start(self) -> None:
        """Register the routes and start serving."""
        try:
            self._setup_routes()
            self.server.start()
        except Exception as exc:
            logger.error("%s", exc)

    def stop(self) -> None:
        """Stop serving."""
        try:
            self.server.stop()
        except Exception as exc:
            logger.error("%s", exc)

    def _say_hello(self, request: HttpRequest) -> HttpResponse:
        response = HttpResponse(HttpStatusCode.OK)
        response.set_header("Content-Type", "text/plain")
        response.set_content("Hello, World!")
        return response

    def _main_page(self, request: HttpRequest) -> HttpResponse:
        response = HttpResponse(HttpStatusCode.OK)
        response.set_header("Content-Type", "text/html")
        response.set_content(self.full_body.render())
        return response

    def _setup_routes(self) -> None:
        for method in (HttpMethod.HEAD, HttpMethod.GET):
            self.server.register_handler("/hello", method, self._say_hello)
        for method in (HttpMethod.HEAD, HttpMethod.GET):
            self.server.register_handler("/", method, self._main_page)