"""
Request helpers.

Every helper builds its own client from the current configuration
snapshot, sends one blocking request, insists on ``200 OK`` and then
decodes or relays the body. Failures surface as httpfacade exceptions:

- TransportError / RequestTimeoutError / ProxyResolutionError when the
  request could not be exchanged
- UnexpectedStatusError for any other status; the body is discarded
- EncodingError before sending, DecodingError after a 200
- LocalIOError when the download destination cannot be written
"""

from pathlib import Path
from typing import Any, Optional, Sequence, Union

import requests

from ..constants import HTTP_STATUS_OK, JSON_CONTENT_TYPE, XML_CONTENT_TYPE
from ..exceptions import LocalIOError, UnexpectedStatusError
from ..infrastructure.codecs import DecodeTarget, decode_json, decode_xml, encode_json, encode_xml
from ..infrastructure.http import Deadline, MultipartField, build_client, encode_multipart
from ..logging import get_logger

logger = get_logger(__name__)


def _check_status(response: requests.Response, uri: str, method: str) -> None:
    if response.status_code != HTTP_STATUS_OK:
        logger.debug(f"Rejecting {method} {uri}", status_code=response.status_code)
        raise UnexpectedStatusError(uri, response.status_code, method, response.reason)


def _fetch(method: str, uri: str, data: Optional[bytes] = None, content_type: Optional[str] = None) -> bytes:
    """Send one request and return the body of a 200 response.

    The configured timeout bounds the whole exchange, body included.
    """
    with build_client() as client:
        deadline = Deadline(client.timeout)
        if method == "POST":
            response = client.post(uri, data, content_type, deadline=deadline)
        else:
            response = client.get(uri, deadline=deadline)

        with response:
            _check_status(response, uri, method)
            return client.read_body(response, uri, method, deadline)


def get_json(uri: str, into: Optional[DecodeTarget] = None) -> Any:
    """GET ``uri`` and decode the JSON response.

    Args:
        uri: URL to fetch
        into: Optional pydantic model class or callable applied to the decoded value

    Returns:
        The decoded value, converted by ``into`` when given
    """
    return decode_json(_fetch("GET", uri), uri, into)


def get_xml(uri: str, into: Optional[DecodeTarget] = None) -> Any:
    """GET ``uri`` and parse the XML response.

    Returns the root Element, or the result of ``into``.
    """
    return decode_xml(_fetch("GET", uri), uri, into)


def get_body(uri: str) -> bytes:
    """GET ``uri`` and return the raw response body."""
    return _fetch("GET", uri)


def post_json(uri: str, body: Any) -> bytes:
    """POST ``body`` as JSON (HTML escaping off) and return the raw response body."""
    payload = encode_json(body, escape_html=False)
    return _fetch("POST", uri, payload, JSON_CONTENT_TYPE)


def post_json_into(
    uri: str,
    body: Any,
    into: Optional[DecodeTarget] = None,
    content_type: Optional[str] = None,
) -> Any:
    """POST ``body`` as JSON and decode the JSON response.

    Args:
        uri: URL to post to
        body: Object to encode; HTML-sensitive characters are escaped
        into: Optional pydantic model class or callable for the decoded value
        content_type: Overrides ``application/json;charset=utf-8``
    """
    payload = encode_json(body)
    content = _fetch("POST", uri, payload, content_type or JSON_CONTENT_TYPE)
    return decode_json(content, uri, into)


def post_xml_into(uri: str, body: Any, into: Optional[DecodeTarget] = None) -> Any:
    """POST ``body`` as XML and parse the XML response."""
    payload = encode_xml(body)
    content = _fetch("POST", uri, payload, XML_CONTENT_TYPE)
    return decode_xml(content, uri, into)


def post_file(
    field_name: str,
    filename: str,
    content_type: str,
    data: bytes,
    uri: str,
) -> bytes:
    """Upload one file as a single-part multipart form.

    ``content_type`` is sent as given; an empty value leaves the part without
    a Content-Type header.
    """
    field = MultipartField(
        name=field_name,
        value=data,
        filename=filename,
        content_type=content_type,
    )
    return post_multipart_form([field], uri)


def post_multipart_form(fields: Sequence[MultipartField], uri: str) -> bytes:
    """POST ``fields`` as multipart/form-data, in order, and return the raw response body.

    The body is fully encoded before the request is built, so a field that
    cannot be encoded raises MultipartEncodingError without contacting the
    server.
    """
    body, content_type = encode_multipart(fields)
    return _fetch("POST", uri, body, content_type)


def download_file(dest_path: Union[str, Path], uri: str) -> Path:
    """Stream the body of ``uri`` into a newly created (or truncated) file.

    The status is checked before the file is opened, so a non-200 response
    leaves no file behind. The configured timeout bounds the whole transfer;
    a transfer that fails or runs out of time midway leaves the partial file
    in place.

    Returns:
        Path of the written file
    """
    path = Path(dest_path)

    with build_client() as client:
        deadline = Deadline(client.timeout)
        response = client.get(uri, deadline=deadline)
        with response:
            _check_status(response, uri, "GET")

            try:
                destination = open(path, "wb")
            except OSError as e:
                raise LocalIOError(path, "create", e) from e

            written = 0
            with destination:
                try:
                    for chunk in client.iter_body(response, uri, "GET", deadline):
                        destination.write(chunk)
                        written += len(chunk)
                except OSError as e:
                    raise LocalIOError(path, "write", e) from e

    logger.debug(f"Downloaded {uri}", path=str(path), bytes=written)
    return path
