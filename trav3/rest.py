#-
# #%L
# Trav3 Python Client
# %%
# Copyright (C) 2025 Contrast Security, Inc.
# %%
# Contact: support@contrastsecurity.com
# License: Commercial
# NOTICE: This Software and the patented inventions embodied within may only be
# used as part of Contrast Security's commercial offerings. Even though it is
# made available through public repositories, use of this Software is subject to
# the applicable End User Licensing Agreement found at
# https://www.contrastsecurity.com/enduser-terms-0317a or as otherwise agreed
# between Contrast Security and the End User. The Software may not be reverse
# engineered, modified, repackaged, sold, redistributed or otherwise used in a
# way not consistent with the End User License Agreement.
# #L%
#

"""HTTP transport for the Travis CI API.

Each verb function takes the client whose headers and timeout apply, sends
one request, and returns a ``Success`` for status 200, 201 or 202 and a
``RequestError`` otherwise. Network failures from ``requests`` are logged and
re-raised unchanged.
"""

import json

import requests

from trav3.response import Success, RequestError
from trav3.utils import debug_log, log, truncate

SUCCESS_CODES = (200, 201, 202)


def create(travis, url, data=None):
    """POST a JSON-encoded payload."""
    response = _send(travis, "POST", url, data=_json_body(data))
    return output(travis, response)


def delete(travis, url):
    response = _send(travis, "DELETE", url)
    return output(travis, response)


def get(travis, url, raw_reply=False):
    """
    GET a URL.

    Args:
        travis: The client issuing the request
        url: Full request URL, including any query string
        raw_reply: Return the body text instead of a parsed response

    Returns:
        Success or RequestError, or str when raw_reply is True
    """
    response = _send(travis, "GET", url)
    if raw_reply:
        return response.text
    return output(travis, response)


def patch(travis, url, data=None):
    """PATCH with a JSON-encoded payload."""
    response = _send(travis, "PATCH", url, data=_json_body(data))
    return output(travis, response)


def post(travis, url, body=None):
    """POST a raw, already serialized body."""
    response = _send(travis, "POST", url, data=body)
    return output(travis, response)


def output(travis, response):
    """Wraps a transport response in the result variant its status selects."""
    if response.status_code in SUCCESS_CODES:
        return Success(travis, response)
    return RequestError(travis, response)


def _json_body(data):
    if not data:
        return None
    return json.dumps(data)


def _send(travis, method, url, data=None):
    headers = {str(key): str(value) for key, value in travis.headers.items()}
    timeout = travis.config.timeout

    debug_log(f"Making {method} request to: {url}")
    if data is not None:
        debug_log(f"Request body: {truncate(data)}")

    try:
        response = requests.request(method, url, headers=headers, data=data, timeout=timeout)
    except requests.exceptions.RequestException as e:
        log(f"Error during {method} request to {url}: {e}", is_error=True)
        raise

    debug_log(f"{method} {url} Response Status Code: {response.status_code}")
    return response
