import socket

import pytest

from ev3finder.http_message import HttpMethod, HttpRequest, HttpResponse, HttpStatusCode
from ev3finder.http_server import MAX_BUFFER_SIZE, HttpServer
from ev3finder.uri import Uri

GET_HELLO = "GET /hello HTTP/1.1\r\nHost: localhost\r\n\r\n"
HEAD_HELLO = "HEAD /hello HTTP/1.1\r\nHost: localhost\r\n\r\n"
HELLO = "Hello, World!"


def _hello(request):
    response = HttpResponse(HttpStatusCode.OK)
    response.set_header("Content-Type", "text/plain")
    response.set_content(HELLO)
    return response


@pytest.fixture
def server():
    srv = HttpServer("127.0.0.1", 0)
    srv.register_handler("/hello", HttpMethod.GET, _hello)
    srv.register_handler("/hello", HttpMethod.HEAD, _hello)
    return srv


def test_unregistered_path_is_not_found(server):
    response = server.handle_request(HttpRequest(HttpMethod.GET, Uri("/missing")))
    assert response.status_code == HttpStatusCode.NOT_FOUND


def test_unregistered_method_is_not_allowed(server):
    response = server.handle_request(HttpRequest(HttpMethod.POST, Uri("/hello")))
    assert response.status_code == HttpStatusCode.METHOD_NOT_ALLOWED


def test_handler_receives_request(server):
    seen = []

    def handler(request):
        seen.append(request)
        return _hello(request)

    server.register_handler("/echo", HttpMethod.PUT, handler)
    request = HttpRequest(HttpMethod.PUT, Uri("/echo"))
    response = server.handle_request(request)
    assert seen == [request]
    assert response.content == HELLO


def test_paths_are_case_insensitive(server):
    server.register_handler("/Mixed", HttpMethod.GET, _hello)
    response = server.handle_request(HttpRequest(HttpMethod.GET, Uri("/MIXED")))
    assert response.status_code == HttpStatusCode.OK


def test_first_registration_is_kept(server):
    server.register_handler("/hello", HttpMethod.GET, lambda r: HttpResponse(HttpStatusCode.FOUND))
    response = server.handle_request(HttpRequest(HttpMethod.GET, Uri("/hello")))
    assert response.status_code == HttpStatusCode.OK


def test_register_with_uri_object(server):
    server.register_handler(Uri("/other"), HttpMethod.DELETE, _hello)
    response = server.handle_request(HttpRequest(HttpMethod.DELETE, Uri("/other")))
    assert response.content == HELLO


def test_handle_data_get(server):
    text = server.handle_data(GET_HELLO.encode()).decode()
    assert text.startswith("HTTP/1.1 200 OK\r\n")
    assert f"Content-Length: {len(HELLO)}\r\n" in text
    assert "Content-Type: text/plain\r\n" in text
    assert text.endswith("\r\n\r\n" + HELLO)


def test_handle_data_head_omits_content(server):
    text = server.handle_data(HEAD_HELLO).decode()
    assert text.startswith("HTTP/1.1 200 OK\r\n")
    assert f"Content-Length: {len(HELLO)}\r\n" in text
    assert text.endswith("\r\n\r\n")
    assert HELLO not in text


def test_handle_data_unknown_method_is_bad_request(server):
    text = server.handle_data("FETCH /hello HTTP/1.1\r\n\r\n").decode()
    assert text.startswith("HTTP/1.1 400 Bad Request\r\n")
    assert text.endswith("Unexpected HTTP method")


def test_handle_data_missing_start_line(server):
    text = server.handle_data("garbage").decode()
    assert text.startswith("HTTP/1.1 400 Bad Request\r\n")
    assert text.endswith("Could not find request start line")


def test_handle_data_old_version_not_supported(server):
    text = server.handle_data("GET /hello HTTP/1.0\r\n\r\n").decode()
    assert text.startswith("HTTP/1.1 505 \r\n")
    assert text.endswith("HTTP version not supported")


def test_handle_data_handler_error_is_internal_error(server):
    def broken(request):
        raise RuntimeError("boom")

    server.register_handler("/broken", HttpMethod.GET, broken)
    text = server.handle_data("GET /broken HTTP/1.1\r\n\r\n").decode()
    assert text.startswith("HTTP/1.1 500 Internal Server Error\r\n")
    assert text.endswith("boom")


def test_handle_data_handler_value_error_is_bad_request(server):
    def picky(request):
        raise ValueError("bad input")

    server.register_handler("/picky", HttpMethod.GET, picky)
    text = server.handle_data("GET /picky HTTP/1.1\r\n\r\n").decode()
    assert text.startswith("HTTP/1.1 400 Bad Request\r\n")
    assert text.endswith("bad input")


def test_handle_data_ignores_bytes_after_nul(server):
    text = server.handle_data(GET_HELLO.encode() + b"\0trailing junk").decode()
    assert text.endswith("\r\n\r\n" + HELLO)


def test_handle_data_truncates_to_buffer_size(server):
    server.register_handler("/big", HttpMethod.GET, lambda r: _big_response())
    data = server.handle_data("GET /big HTTP/1.1\r\n\r\n")
    assert len(data) == MAX_BUFFER_SIZE


def _big_response():
    response = HttpResponse()
    response.set_content("a" * (MAX_BUFFER_SIZE * 2))
    return response


def _read_until(sock, suffix):
    received = b""
    while not received.endswith(suffix):
        chunk = sock.recv(MAX_BUFFER_SIZE)
        if not chunk:
            break
        received += chunk
    return received.decode()


def test_live_round_trip_with_keep_alive(server):
    with server:
        assert server.running
        assert server.port > 0
        with socket.create_connection(("127.0.0.1", server.port), timeout=5) as client:
            for _ in range(2):
                client.sendall(GET_HELLO.encode())
                text = _read_until(client, HELLO.encode())
                assert text.startswith("HTTP/1.1 200 OK\r\n")
                assert text.endswith(HELLO)
    assert not server.running


def test_stop_without_start_leaves_server_stopped():
    srv = HttpServer("127.0.0.1", 0)
    srv.stop()
    assert srv.running is False


def test_start_twice_raises(server):
    with server:
        with pytest.raises(RuntimeError):
            server.start()