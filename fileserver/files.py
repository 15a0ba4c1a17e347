"""
Filesystem side of the server.
Maps URL paths onto the served tree and turns one HTTP method into one
filesystem operation, reporting the result as an Outcome.
"""

import enum
import logging
import os
from typing import NamedTuple, Optional

logger = logging.getLogger(__name__)


class Kind(enum.Enum):
    INDEX = "index"
    READ = "read"
    WRITTEN = "written"
    DELETED = "deleted"
    NOT_FOUND = "not_found"
    WRITE_CONFLICT = "write_conflict"
    WRITE_FAILED = "write_failed"
    METHOD_NOT_ALLOWED = "method_not_allowed"


class Outcome(NamedTuple):
    kind: Kind
    payload: bytes = b""
    filename: Optional[str] = None


def resolve(url_path: str, root: str) -> str:
    """
    Map a URL path to a filesystem path under root.

    Exactly one leading slash is stripped and the remainder is joined onto
    root. Nothing is normalised: ``..`` segments and absolute remainders
    such as ``//etc/hosts`` go to os.path.join as they are, so the result
    can land outside root.
    """
    if url_path.startswith("/"):
        url_path = url_path[1:]
    return os.path.join(root, url_path)


def apply(method: str, fs_path: str, body: bytes = b"") -> Outcome:
    """Run the filesystem operation for one HTTP method."""
    if method == "GET":
        return read_file(fs_path)
    if method in ("POST", "PUT"):
        return write_file(fs_path, body)
    if method == "DELETE":
        return delete_file(fs_path)
    return Outcome(Kind.METHOD_NOT_ALLOWED)


def read_file(fs_path: str) -> Outcome:
    try:
        with open(fs_path, "rb") as f:
            data = f.read()
    except OSError as e:
        logger.debug(f"READ {fs_path} failed: {e}")
        return Outcome(Kind.NOT_FOUND)
    return Outcome(Kind.READ, data, os.path.basename(fs_path))


def write_file(fs_path: str, body: bytes) -> Outcome:
    # Full overwrite for both POST and PUT, never append
    try:
        with open(fs_path, "wb") as f:
            f.write(body)
    except FileExistsError:
        logger.debug(f"WRITE {fs_path} refused: target already exists")
        return Outcome(Kind.WRITE_CONFLICT)
    except OSError as e:
        logger.debug(f"WRITE {fs_path} failed: {e}")
        return Outcome(Kind.WRITE_FAILED)
    logger.debug(f"WRITE {fs_path} ({len(body)} bytes)")
    return Outcome(Kind.WRITTEN)


def delete_file(fs_path: str) -> Outcome:
    try:
        os.remove(fs_path)
    except OSError as e:
        logger.debug(f"DELETE {fs_path} failed: {e}")
        return Outcome(Kind.NOT_FOUND)
    return Outcome(Kind.DELETED)
