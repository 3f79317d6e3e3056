# ev3finder

Building blocks for an EV3 robot that drives a planned route between
destinations:

- **Geometry**: `Vector2`, `Vector3` and `Line` in `ev3finder.vector2`,
  `ev3finder.vector3` and `ev3finder.line`.
- **Destinations**: `read_destinations` in `ev3finder.config_reader` loads the
  list of targets from a YAML or plain-text file.
- **HTTP**: a small threaded HTTP server, `ev3finder.http_server.HttpServer`.
  Its request and response types are in `ev3finder.http_message`.
  `ev3finder.web_server.WebServer` is a ready status page whose HTML is built
  from `ev3finder.web_components`.
- **TCP messaging**: a single-connection `TCPServer` and `TCPClient` in
  `ev3finder.tcp`.

The package needs Python 3.10 or later and depends only on PyYAML.

## Geometry

```python
from ev3finder.vector2 import Vector2
from ev3finder.line import Line

a = Vector2(0.0, 0.0)
b = Vector2(3.0, 4.0)

a.distance_to(b)               # 5.0
Vector2.lerp(a, b, 0.5)        # the point halfway between a and b
str(Vector2(1, 2))             # "Vector2(1, 2)"

diagonal = Line(Vector2(0, 0), Vector2(1, 1))
crossing = Line(Vector2(0, 1), Vector2(1, 0))

diagonal.length()                    # about 1.414
diagonal.angle()                     # about 45, in degrees from the x axis
diagonal.is_intersecting(crossing)   # True
diagonal.intersection(crossing)      # the point (0.5, 0.5)
```

The comparisons `<`, `<=`, `>` and `>=` on vectors hold only when they hold
for every component. Two vectors can therefore be neither smaller nor larger
than each other. `Line.intersection` treats both segments as infinite lines
and returns the origin when the lines are parallel.

`Vector3` adds a third coordinate, plus `cross` and `distance`. You can build
one from a `Vector2` and a `z` value with `Vector3.from_vector2`. You can also
parse one from text such as `"(1, 2, 3)"` or `"1 2 3"` with
`Vector3.from_string`; a component that is not a number raises `ValueError`.
`to_string` gives a six-decimal form such as
`Vector3(1.000000, 2.000000, 3.000000)`.

## Destinations

`read_destinations(path, file_format)` returns a list of `Vector3`. In each
one, `x` and `y` are the position and `z` is the heading. The format is chosen
with the `FileFormat` enum (`FileFormat.TEXT`, the default, or
`FileFormat.YAML`).

A YAML file holds a `destinations` list:

```yaml
destinations:
  - x: 1
    y: 2
    z: 3
  - x: 4
    y: 5
    z: 6
```

A text file holds one destination per line. Empty lines and lines starting
with `#` are skipped:

```text
# x y heading
(1 2 3)
(4 5 6)
```

`ConfigError` is raised in these cases:

- the file cannot be opened;
- a text line is not a valid vector;
- a YAML file is malformed, has no `destinations` key, or has an entry that
  lacks a numeric `x`, `y` or `z`.

## HTTP

`parse_request` turns raw request text into an `HttpRequest`.
`request_to_string` and `response_to_string` turn request and response objects
back into wire text. `parse_request` removes all whitespace from header names
and values. Setting content with `set_content` also sets `Content-Length`.

```python
from ev3finder.http_message import parse_request

request = parse_request("GET /Hello HTTP/1.1\r\nHost: localhost\r\n\r\n")
request.header("Host")          # "localhost"
request.uri.path                # "/hello"
```

Only HTTP/1.1 requests are accepted. Other versions raise
`HttpVersionNotSupportedError`, and malformed requests raise `ValueError`.

`HttpServer(host, port)` routes each request by path and `HttpMethod` to the
handlers registered with `register_handler`:

- A handler takes an `HttpRequest` and returns an `HttpResponse`.
- Paths are matched without regard to case.
- An unknown path answers 404 and an unknown method answers 405.
- `start` begins serving in background threads and `stop` shuts them down.
  The server can also be used as a context manager.
- With port `0`, a free port is chosen and `port` reports it after `start`.
- `handle_data` turns raw request bytes into raw response bytes without any
  networking.

`WebServer` wraps an `HttpServer`, which you can reach as its `server`
attribute. By default it listens on `0.0.0.0:8080` and has two routes:

- `/hello` answers with plain text.
- `/` answers with the HTML page rendered by its `FullBody`.

Errors while it starts or stops are logged, not raised.

## TCP messaging

`TCPServer.start(port)` waits for one client to connect. Its `ready` event is
set and `port` is filled in once it is listening. `TCPClient(host, port)`
connects on construction and raises `ConnectionError` on failure.

After that, both sides exchange text messages with `send_message` and
`receive_message`. When a peer sends the message `exit`, the receiving side
closes its connection. `TCPClient.close` and `TCPServer.stop` release the
sockets.

## What it does not do

The package has no command-line program. It does not drive motors, read
sensors, or plan paths between destinations. It offers the geometry,
destination loading and communication pieces that such a controller would
use.