"""Deprecated mns0101 signature variant (variable-width payload, base58 text)."""

import warnings as _warnings_module

from .main import DecodeError, FormatError, xhsign


X3_PREFIX = "mns0101_"
VERSION_BYTES = (119, 104, 96, 41)
TIMESTAMP_XOR_KEY = 41
STARTUP_TIME_OFFSET_MIN = 1000
STARTUP_TIME_OFFSET_MAX = 4000
FIXED_INT_VALUE_1 = 15
FIXED_INT_VALUE_2 = 1291
ENV_STATIC_BYTES = (1, 249, 83, 102, 103, 201, 181, 131, 99, 94, 7, 68, 250, 132, 21)
OUTPUT_BYTE_COUNT = 8


def process_hex_parameter(hex_string: str, xor_key: int) -> bytes:
    digest = xhsign._digest_bytes(hex_string)
    return bytes(b ^ xor_key for b in digest[:OUTPUT_BYTE_COUNT])


def encode_timestamp(timestamp_ms: int, entropy) -> bytes:
    # first byte is noise, the rest is the LE timestamp masked with 41
    masked = bytearray(b ^ TIMESTAMP_XOR_KEY for b in xhsign.int_to_le(timestamp_ms, 8))
    masked[0] = entropy.randint(0, 255)
    return bytes(masked)


def length_prefixed(text: str) -> bytes:
    raw = text.encode("utf-8")
    if len(raw) > 0xFF:
        raise FormatError(f"field is {len(raw)} bytes; length prefix holds at most 255")
    return bytes([len(raw)]) + raw


def build_payload(
    d_value: str,
    a1_value: str,
    app_id: str = "xhs-pc-web",
    content_string: str = "",
    timestamp=None,
    entropy=None,
) -> bytes:
    entropy = xhsign._entropy(entropy)
    le = xhsign.int_to_le
    if timestamp is None:
        timestamp = entropy.now()
    timestamp_ms = int(timestamp * 1000)
    seed_bytes = le(entropy.seed32(), 4)

    payload = bytearray(VERSION_BYTES)
    payload += seed_bytes
    payload += encode_timestamp(timestamp_ms, entropy)
    startup = timestamp_ms - entropy.randint(STARTUP_TIME_OFFSET_MIN, STARTUP_TIME_OFFSET_MAX)
    payload += le(startup, 8)
    payload += le(FIXED_INT_VALUE_1, 4)
    payload += le(FIXED_INT_VALUE_2, 4)
    payload += le(len(content_string.encode("utf-8")), 4)
    payload += process_hex_parameter(d_value, seed_bytes[0])
    payload += length_prefixed(a1_value)
    payload += length_prefixed(app_id)
    payload.append(ENV_STATIC_BYTES[0])
    payload.append(entropy.randint(0, 255))
    payload += bytes(ENV_STATIC_BYTES[1:])
    return bytes(payload)


def sign_x3(d_value, a1_value, app_id="xhs-pc-web", content_string="", timestamp=None, entropy=None) -> str:
    _warnings_module.warn(
        "mns0101 signatures are deprecated; use the default mns0301 protocol",
        DeprecationWarning,
        stacklevel=xhsign.caller_stacklevel(),
    )
    payload = build_payload(d_value, a1_value, app_id, content_string, timestamp, entropy)
    return X3_PREFIX + xhsign.b58encode(xhsign.xor_transform(payload))


def b58decode(text: str) -> bytes:
    alphabet = xhsign.BASE58_ALPHABET
    leading = len(text) - len(text.lstrip(alphabet[0]))
    number = 0
    for ch in text:
        index = alphabet.find(ch)
        if index < 0:
            raise DecodeError(f"Invalid base58 character: {ch!r}")
        number = number * 58 + index
    body = number.to_bytes((number.bit_length() + 7) // 8, "big") if number else b""
    return b"\x00" * leading + body


def decode_x3(signature: str) -> bytes:
    if not signature.startswith(X3_PREFIX):
        raise DecodeError(f"Unknown signature prefix: {signature[:8]!r}")
    return xhsign.xor_transform(b58decode(signature[len(X3_PREFIX):]))


__all__ = [
    "X3_PREFIX",
    "b58decode",
    "build_payload",
    "decode_x3",
    "sign_x3",
]
