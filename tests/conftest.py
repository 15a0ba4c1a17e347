import io
import threading

import pytest

from fileserver.logs import access_logger, configure_access_log
from fileserver.server import create_app, make_server


@pytest.fixture
def root(tmp_path):
    return str(tmp_path)


@pytest.fixture
def app(root):
    return create_app(root)


@pytest.fixture
def client(app):
    client = app.test_client()
    client.environ_base["REMOTE_PORT"] = "54321"
    return client


@pytest.fixture
def access_log():
    """Capture access lines as (stdout, stderr) string buffers."""
    saved = list(access_logger.handlers), access_logger.propagate
    out, err = io.StringIO(), io.StringIO()
    configure_access_log(stdout=out, stderr=err)
    yield out, err
    access_logger.handlers[:] = saved[0]
    access_logger.propagate = saved[1]


@pytest.fixture
def live_server(app):
    """A real threaded server on a free port; yields (base_url, server, thread)."""
    server = make_server(app, "127.0.0.1", 0)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.port}", server, thread
    server.shutdown()
    thread.join(timeout=5)
