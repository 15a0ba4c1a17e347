"""Per-request entry point: route, run the operation, build and log the response."""

import logging
import urllib.parse

from werkzeug.exceptions import ClientDisconnected

from . import index
from .files import apply, resolve
from .logs import log_request
from .responses import build

logger = logging.getLogger(__name__)


def raw_path(req) -> str:
    """
    The request path exactly as the client sent it, minus the query string.

    Percent-escapes are left alone, so ``/my%20notes.txt`` names the file
    ``my%20notes.txt`` and ``%2e%2e%2f`` never turns into ``../``.
    """
    uri = req.environ.get("RAW_URI") or req.environ.get("REQUEST_URI")
    if not uri:
        return req.path
    # WSGI hands the raw bytes over as latin-1
    uri = uri.encode("latin-1").decode("utf-8", "replace")
    if not uri.startswith("/"):
        # absolute-form target, e.g. "http://host/a.txt"
        uri = urllib.parse.urlsplit(uri).path or "/"
    return uri.split("?", 1)[0].split("#", 1)[0]


def peer_address(req) -> str:
    """``ip:port`` of the peer (``[ip]:port`` for IPv6), or just the ip if the port is unknown."""
    ip = req.remote_addr
    port = req.environ.get("REMOTE_PORT")
    if port is None:
        return ip
    if ":" in ip:
        return f"[{ip}]:{port}"
    return f"{ip}:{port}"


def handle(req, remote_address, root):
    """
    Serve one request against the tree under root.

    ``/`` goes to the index page and its body is never read. Any other path
    has its whole body buffered, is resolved under root and gets exactly one
    filesystem operation. One access line is logged per completed request.
    """
    method = req.method
    url_path = raw_path(req)

    if url_path == "/":
        outcome = index.respond(method)
    else:
        try:
            body = req.get_data(cache=False)
        except ClientDisconnected:
            logger.warning(f"{remote_address} {method} {url_path}: connection lost while reading body")
            raise
        outcome = apply(method, resolve(url_path, root), body)

    response = build(outcome)
    log_request(response.status_code, remote_address, method, url_path)
    return response
