"""Turn an Outcome into the HTTP response sent back to the client."""

import mimetypes
import unicodedata
import urllib.parse

from flask import Response
from werkzeug.http import dump_options_header

from .files import Kind, Outcome

STATUS_CODES = {
    Kind.INDEX: 200,
    Kind.READ: 200,
    Kind.WRITTEN: 200,
    Kind.DELETED: 200,
    Kind.NOT_FOUND: 404,
    Kind.METHOD_NOT_ALLOWED: 405,
    Kind.WRITE_CONFLICT: 409,
    Kind.WRITE_FAILED: 500,
}


class FileResponse(Response):
    # Empty responses go out without a Content-Type
    default_mimetype = None


def content_disposition(filename: str) -> str:
    """Header value asking the client to save the body as ``filename``."""
    try:
        filename.encode("ascii")
        options = {"filename": filename}
    except UnicodeEncodeError:
        simple = unicodedata.normalize("NFKD", filename).encode("ascii", "ignore").decode("ascii")
        quoted = urllib.parse.quote(filename, safe="!#$&+^`|")
        options = {"filename": simple or "download", "filename*": f"UTF-8''{quoted}"}
    return dump_options_header("attachment", options)


def build(outcome: Outcome) -> Response:
    status = STATUS_CODES[outcome.kind]

    if outcome.kind is Kind.INDEX:
        return FileResponse(outcome.payload, status, mimetype="text/html")

    if outcome.kind is Kind.READ:
        mime = mimetypes.guess_type(outcome.filename)[0] or "application/octet-stream"
        headers = {"Content-Disposition": content_disposition(outcome.filename)}
        # content_type, not mimetype: the file's encoding is unknown, so no charset is added
        return FileResponse(outcome.payload, status, headers=headers, content_type=mime)

    return FileResponse(b"", status)
