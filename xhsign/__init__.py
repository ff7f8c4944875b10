"""
XHSIGN - request signature toolkit for the Xiaohongshu web API

This module provides plain functions that produce the x-s, x-s-common and
tracing headers the web client attaches to API calls, plus decoders for the
same values. All functions accept an optional ``entropy`` to replay random
draws and the clock.
"""

from .main import *
from .version import __version__

# ============================================================================
# SIGNATURE FUNCTIONS (request → header value)
# ============================================================================

def sign_xs(method: str, uri: str, a1_value: str, xsec_appid=None, payload=None, timestamp=None, session=None, **kwargs):
    """
    Produce the x-s header value.

    Args:
        method: "GET" or "POST" (case-insensitive)
        uri: Request path or full URL; only the path is signed
        a1_value: Value of the a1 cookie
        xsec_appid: Application id (defaults to XHSIGN_APP_ID or "xhs-pc-web")
        payload: Query params for GET, JSON body for POST
        timestamp: Unix seconds; defaults to now
        session: Optional SessionState for page-consistent counters

    Returns:
        "XYS_"-prefixed signature text

    Note:
        - protocol="mns0101" selects the deprecated legacy payload
    """
    return xhsign.sign_xs(method, uri, a1_value, xsec_appid, payload, timestamp, session, **kwargs)


def sign_xs_get(uri: str, a1_value: str, xsec_appid=None, params=None, timestamp=None, session=None, **kwargs):
    """GET shorthand for sign_xs()."""
    return xhsign.sign_xs_get(uri, a1_value, xsec_appid, params, timestamp, session, **kwargs)


def sign_xs_post(uri: str, a1_value: str, xsec_appid=None, payload=None, timestamp=None, session=None, **kwargs):
    """POST shorthand for sign_xs()."""
    return xhsign.sign_xs_post(uri, a1_value, xsec_appid, payload, timestamp, session, **kwargs)


def sign_xs_common(cookies, fingerprint=None, entropy=None):
    """
    Produce the x-s-common header value.

    Args:
        cookies: Cookie dict or "k=v; k2=v2" header text; must contain a1
        fingerprint: Reuse an existing fingerprint record instead of a fresh one
        entropy: Optional Entropy for reproducible output

    Returns:
        Custom-alphabet Base64 of the x-s-common JSON envelope
    """
    return xhsign.sign_xs_common(cookies, fingerprint=fingerprint, entropy=entropy)


def sign_headers(method: str, uri: str, cookies, xsec_appid=None, params=None, payload=None, timestamp=None, session=None, **kwargs):
    """
    Produce every signed header for one request.

    Args:
        method: "GET" or "POST"
        uri: Request path or full URL
        cookies: Cookie dict or header text; must contain a1
        params: GET query params (not allowed for POST)
        payload: POST body (not allowed for GET)
        timestamp: Unix seconds shared by x-s, x-t and the xray trace id
        session: Optional SessionState

    Returns:
        dict with x-s, x-s-common, x-t, x-b3-traceid and x-xray-traceid
    """
    return xhsign.sign_headers(method, uri, cookies, xsec_appid, params, payload, timestamp, session, **kwargs)


def sign_headers_get(uri: str, cookies, xsec_appid=None, params=None, timestamp=None, session=None, **kwargs):
    return xhsign.sign_headers_get(uri, cookies, xsec_appid, params, timestamp, session, **kwargs)


def sign_headers_post(uri: str, cookies, xsec_appid=None, payload=None, timestamp=None, session=None, **kwargs):
    return xhsign.sign_headers_post(uri, cookies, xsec_appid, payload, timestamp, session, **kwargs)

# ============================================================================
# DECODING FUNCTIONS (header value → structure)
# ============================================================================

def decode_xs(signature: str):
    """
    Decode an x-s value back to its JSON envelope.

    Args:
        signature: x-s text, with or without the "XYS_" prefix

    Returns:
        dict with x0..x4; x3 holds the mns signature

    Note:
        - Raises DecodeError on malformed input
    """
    return xhsign.decode_xs(signature)


def decode_x3(signature: str):
    """
    Recover the raw payload bytes of an x3 signature.

    Args:
        signature: "mns0301_..." (or legacy "mns0101_...") text

    Returns:
        Payload bytes after the XOR transform is undone
    """
    return xhsign.decode_x3(signature)


def decode_xs_common(signature: str):
    return xhsign.decode_xs_common(signature)

# ============================================================================
# REQUEST HELPERS
# ============================================================================

def parse_cookies(cookies):
    return xhsign.parse_cookies(cookies)


def extract_uri(url: str):
    return xhsign.extract_uri(url)


def build_url(base_url: str, params=None):
    """
    Append query params the way the web client does.

    Args:
        base_url: URL or path, may already carry a query
        params: dict of query values; lists are joined with ","

    Returns:
        URL text where only "=" inside values is escaped
    """
    return xhsign.build_url(base_url, params)


def build_json_body(payload: dict):
    return xhsign.build_json_body(payload)


def get_x_t(timestamp=None):
    return xhsign.get_x_t(timestamp)


def b3_trace_id(entropy=None):
    return xhsign.b3_trace_id(entropy)


def xray_trace_id(timestamp=None, seq=None, entropy=None):
    return xhsign.xray_trace_id(timestamp, seq, entropy)


Entropy = xhsign.Entropy
SessionState = xhsign.SessionState
SignState = xhsign.SignState
FingerprintEngine = xhsign.FingerprintEngine
