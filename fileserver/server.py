"""
HTTP file server.
GET /name downloads a file under the served directory, POST/PUT /name stores
the request body there, DELETE /name removes it. GET / returns a small upload
page. One thread per connection; SIGINT/SIGTERM stop accepting and let
in-flight requests finish.
"""

import logging
import os
import signal
import sys
import threading

from flask import Flask, request
from werkzeug.routing import PathConverter, Rule
from werkzeug.serving import make_server as make_wsgi_server

from .config import load_config
from .handler import handle, peer_address
from .logs import configure_logging

logger = logging.getLogger(__name__)


class AnyPathConverter(PathConverter):
    # Like path, but also matches segments that start with a slash
    regex = ".+"
    part_isolating = False


def create_app(root: str) -> Flask:
    app = Flask(__name__, static_folder=None)
    app.config["CONTENT_ROOT"] = root
    app.url_map.converters["anypath"] = AnyPathConverter

    # methods=None lets every HTTP method through; the handler decides what is allowed
    app.url_map.add(Rule("/", endpoint="serve", merge_slashes=False))
    app.url_map.add(Rule("/<anypath:url_path>", endpoint="serve", merge_slashes=False))

    @app.endpoint("serve")
    def serve_request(url_path=None):
        return handle(request, peer_address(request), app.config["CONTENT_ROOT"])

    return app


def make_server(app: Flask, host: str, port: int):
    """Bind a thread-per-connection WSGI server for app (port 0 picks a free port)."""
    server = make_wsgi_server(host, port, app, threaded=True)
    # Non-daemon workers are joined by server_close(), so shutdown waits for them
    server.daemon_threads = False
    return server


def install_shutdown_handler(server) -> None:
    def _on_signal(signum, frame):
        logger.info(f"Received signal {signum}, no longer accepting connections")
        # shutdown() blocks until the accept loop exits, so it cannot run on that loop's thread
        threading.Thread(target=server.shutdown, daemon=True).start()

    signal.signal(signal.SIGINT, _on_signal)
    signal.signal(signal.SIGTERM, _on_signal)


def serve(server, root: str) -> None:
    """Run the accept loop until shutdown, then wait for in-flight requests."""
    install_shutdown_handler(server)
    print(f"Starting server on http://localhost:{server.port} in {root}", flush=True)
    server.serve_forever()
    logger.info("Server stopped")


def main(argv=None) -> None:
    config = load_config(argv)
    configure_logging(config.log_level)

    os.makedirs(config.root, exist_ok=True)
    app = create_app(config.root)

    try:
        server = make_server(app, config.host, config.port)
        serve(server, config.root)
    except OSError as e:
        print(f"server error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
