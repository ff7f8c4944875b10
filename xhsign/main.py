# XHSIGN REQUEST SIGNING ENGINE ->

import os as _os_module


class SignatureError(ValueError):
    """Base class for every error raised by the signing engine."""


class ValidationError(SignatureError):
    """Caller input rejected before any signing work starts."""


class FormatError(SignatureError):
    """Malformed digest or hash input met while assembling a payload."""


class DecodeError(SignatureError):
    """Signature text that cannot be mapped back to bytes or JSON."""


class xhsign:
    import base64
    import hashlib
    import json
    import math
    import secrets
    import string
    import struct
    import sys
    import threading
    import time
    import typing
    import warnings
    import urllib.parse
    import numpy as np
    from Crypto.Cipher import ARC4
    from . import catalog

    @staticmethod
    def _env_int(name: str) -> "xhsign.typing.Optional[int]":
        value = _os_module.getenv(name)
        if not value:
            return None
        try:
            parsed = int(value)
        except (TypeError, ValueError):
            return None
        if parsed <= 0:
            return None
        return parsed

    ENGINE_VERSION = "0.4.0"
    SDK_VERSION = "4.2.6"
    PLATFORM = "Windows"
    DEFAULT_APP_ID = _os_module.getenv("XHSIGN_APP_ID", "xhs-pc-web")
    USER_AGENT = _os_module.getenv(
        "XHSIGN_USER_AGENT",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/142.0.0.0 Safari/537.36 Edg/142.0.0.0"
    )
    PROTOCOL_CURRENT = "mns0301"
    PROTOCOL_LEGACY = "mns0101"
    DEFAULT_PROTOCOL = _os_module.getenv("XHSIGN_PROTOCOL", PROTOCOL_CURRENT).strip().lower()
    SORT_QUERY = _os_module.getenv("XHSIGN_SORT_QUERY", "0") == "1"

    MASK_32 = 0xFFFFFFFF
    MAX_SIGNED_32 = 0x7FFFFFFF
    CRC_POLY = 0xEDB88320

    STANDARD_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
    CUSTOM_ALPHABET = "ZmserbBoHQtNP+wOcza/LpngG8yJq42KWYj0DSfdikx3VT16IlUAFM97hECvuRX5"
    X3_ALPHABET = "MfgqrsbcyzPQRStuvC7mn501HIJBo2DEFTKdeNOwxWXYZap89+/A4UVLhijkl63G"
    ALPHABETS: typing.ClassVar[dict[str, str]] = {
        "standard": STANDARD_ALPHABET,
        "custom": CUSTOM_ALPHABET,
        "x3": X3_ALPHABET,
    }
    BASE58_ALPHABET = "NOPQRStuvwxWXYZabcyz012DEFTKLMdefghijkl4563GHIJBC7mnop89+/"

    # 144-byte static key for the payload XOR pass
    HEX_KEY = (
        "71a302257793271ddd273bcee3e4b98d9d7935e1da33f5765e2ea8afb6dc77a5"
        "1a499d23b67c20660025860cbf13d4540d92497f58686c574e508f46e1956344"
        "f39139bf4faf22a3eef120b79258145b2feb5193b6478669961298e79bedca64"
        "6e1a693a926154a5a7a1bd1cf0dedb742f917a747a1e388b234f2277516db711"
        "6035439730fa61e9822a0eca7bff72d8"
    )
    _XOR_KEY = np.frombuffer(bytes.fromhex(HEX_KEY), dtype=np.uint8)
    _XOR_KEY.flags.writeable = False

    VERSION_BYTES = (121, 104, 96, 41)
    PAYLOAD_LENGTH = 144
    A1_LENGTH = 52
    APP_ID_LENGTH = 10
    MD5_XOR_LENGTH = 8
    TIMESTAMP_LE_LENGTH = 8
    A3_PREFIX = (2, 97, 51, 16)
    HASH_IV = (1831565813, 461845907, 2246822507, 3266489909)
    EXPECTED_HEX_LENGTH = 32

    CHECKSUM_VERSION = 1
    ENV_TABLE = (115, 248, 83, 102, 103, 201, 181, 131, 99, 94, 4, 68, 250, 132, 21)
    ENV_CHECKS_DEFAULT = (0, 1, 18, 1, 0, 0, 0, 0, 0, 0, 3, 0, 0, 0, 0)

    SEQUENCE_VALUE_MIN = 15
    SEQUENCE_VALUE_MAX = 50
    _SEQ_MAX_ENV = _env_int("XHSIGN_SEQ_MAX")
    if _SEQ_MAX_ENV is not None and _SEQ_MAX_ENV >= SEQUENCE_VALUE_MIN:
        SEQUENCE_VALUE_MAX = _SEQ_MAX_ENV
    WINDOW_PROPS_LENGTH_MIN = 1000
    WINDOW_PROPS_LENGTH_MAX = 1200
    TIME_OFFSET_MIN = 10
    TIME_OFFSET_MAX = 50

    SESSION_SEQUENCE_INIT = (15, 17)
    SESSION_SEQUENCE_STEP = (0, 1)
    SESSION_WINDOW_PROPS_INIT = (1000, 2000)
    SESSION_WINDOW_PROPS_STEP = (1, 10)

    X3_PREFIX = "mns0301_"
    XYS_PREFIX = "XYS_"
    SIGNATURE_DATA_TEMPLATE: typing.ClassVar[dict[str, str]] = {
        "x0": SDK_VERSION,
        "x1": "xhs-pc-web",
        "x2": PLATFORM,
        "x3": "",
        "x4": "",
    }
    SIGNATURE_XSCOMMON_TEMPLATE: typing.ClassVar[dict[str, "xhsign.typing.Any"]] = {
        "s0": 5,
        "s1": "",
        "x0": "1",
        "x1": SDK_VERSION,
        "x2": PLATFORM,
        "x3": "xhs-pc-web",
        "x4": "4.86.0",
        "x5": "",
        "x6": "",
        "x7": "",
        "x8": "",
        "x9": -596800761,
        "x10": 0,
        "x11": "normal",
    }

    B1_SECRET_KEY = b"xhswebmplfbt"
    B1_SAFE_CHARS = frozenset(string.ascii_letters + string.digits + "!*'()~_-")

    HEX_CHARS = "abcdef0123456789"
    B3_TRACE_ID_LENGTH = 16
    XRAY_TRACE_ID_SEQ_MAX = (1 << 23) - 1
    XRAY_TRACE_ID_TIMESTAMP_SHIFT = 23
    XRAY_TRACE_ID_PART_LENGTH = 16

    _TABLE_LOCK = threading.Lock()
    _CRC_TABLE: typing.ClassVar[typing.Optional[tuple]] = None
    _TRANSLATIONS: typing.ClassVar[dict[str, tuple]] = {}

    class SignState(typing.NamedTuple):
        """Counters captured from a session for exactly one signing call."""

        page_load_timestamp: int
        sequence_value: int
        window_props_length: int
        uri_length: int

    class Entropy:
        """Random draws and wall clock behind one seam so runs can be replayed."""

        def __init__(self, rng=None, clock=None):
            self._rng = rng if rng is not None else xhsign.secrets.SystemRandom()
            self._clock = clock if clock is not None else xhsign.time.time

        def randint(self, low: int, high: int) -> int:
            return self._rng.randint(low, high)

        def random(self) -> float:
            return self._rng.random()

        def seed32(self) -> int:
            return self._rng.getrandbits(32)

        def choice(self, options):
            return options[self._rng.randrange(len(options))]

        def token_bytes(self, count: int) -> bytes:
            return bytes(self._rng.getrandbits(8) for _ in range(count))

        def now(self) -> float:
            return float(self._clock())

        def now_ms(self) -> int:
            return int(self.now() * 1000)

    @staticmethod
    def _entropy(entropy: "xhsign.typing.Optional[xhsign.Entropy]") -> "xhsign.Entropy":
        return entropy if entropy is not None else xhsign.Entropy()

    class SessionState:
        """
        Counters of one simulated browser page, evolved across signing calls.

        The page load time is fixed at construction; the sequence counter and
        the window property count only ever grow by small random steps.
        """

        def __init__(self, entropy=None):
            self._entropy = xhsign._entropy(entropy)
            self._lock = xhsign.threading.Lock()
            self.page_load_timestamp = self._entropy.now_ms()
            self.sequence_value = self._entropy.randint(*xhsign.SESSION_SEQUENCE_INIT)
            self.window_props_length = self._entropy.randint(*xhsign.SESSION_WINDOW_PROPS_INIT)

        def update_state(self) -> None:
            with self._lock:
                self._step()

        def _step(self) -> None:
            self.sequence_value += self._entropy.randint(*xhsign.SESSION_SEQUENCE_STEP)
            self.window_props_length += self._entropy.randint(*xhsign.SESSION_WINDOW_PROPS_STEP)

        def advance(self, uri: str) -> "xhsign.SignState":
            with self._lock:
                self._step()
                return xhsign.SignState(
                    page_load_timestamp=self.page_load_timestamp,
                    sequence_value=self.sequence_value,
                    window_props_length=self.window_props_length,
                    uri_length=len(uri.encode("utf-8")),
                )

    # ------------------------------------------------------------------
    # bit operations
    # ------------------------------------------------------------------
    @staticmethod
    def rotl32(value: int, n: int) -> int:
        value &= xhsign.MASK_32
        n &= 31
        return ((value << n) | (value >> (32 - n))) & xhsign.MASK_32

    @staticmethod
    def to_signed32(value: int) -> int:
        value &= xhsign.MASK_32
        return value - 0x100000000 if value > xhsign.MAX_SIGNED_32 else value

    @staticmethod
    def int_to_le(value: int, length: int = 4) -> bytes:
        return (int(value) & ((1 << (8 * length)) - 1)).to_bytes(length, "little")

    @staticmethod
    def xor_transform(data) -> bytes:
        if isinstance(data, (bytes, bytearray, memoryview)):
            buffer = bytearray(data)
        else:
            buffer = bytearray(int(b) & 0xFF for b in data)
        if not buffer:
            return b""
        arr = xhsign.np.frombuffer(memoryview(buffer), dtype=xhsign.np.uint8)
        span = min(len(arr), len(xhsign._XOR_KEY))
        if span:
            xhsign.np.bitwise_xor(arr[:span], xhsign._XOR_KEY[:span], out=arr[:span])
        return bytes(buffer)

    # ------------------------------------------------------------------
    # CRC32 (platform finalisation)
    # ------------------------------------------------------------------
    @staticmethod
    def _crc_table() -> tuple:
        table = xhsign._CRC_TABLE
        if table is None:
            with xhsign._TABLE_LOCK:
                if xhsign._CRC_TABLE is None:
                    entries = []
                    for d in range(256):
                        r = d
                        for _ in range(8):
                            r = (r >> 1) ^ xhsign.CRC_POLY if r & 1 else r >> 1
                        entries.append(r)
                    xhsign._CRC_TABLE = tuple(entries)
                table = xhsign._CRC_TABLE
        return table

    @staticmethod
    def crc32_js(data, mode: str = "js", signed: bool = True) -> int:
        """
        CRC32 with the browser's finalisation ``(-1 ^ c ^ 0xEDB88320) >>> 0``.

        ``mode="js"`` feeds each character code masked to 8 bits, ``"utf8"``
        feeds the UTF-8 encoding. Bytes and int sequences are fed as-is.
        """
        if isinstance(data, str):
            if mode == "utf8":
                stream = data.encode("utf-8")
            elif mode == "js":
                stream = [ord(ch) & 0xFF for ch in data]
            else:
                raise ValueError(f"Unsupported CRC string mode: {mode!r}")
        else:
            stream = [int(b) & 0xFF for b in data]
        table = xhsign._crc_table()
        state = xhsign.MASK_32
        for b in stream:
            state = table[(state ^ b) & 0xFF] ^ (state >> 8)
        value = (xhsign.MASK_32 ^ state ^ xhsign.CRC_POLY) & xhsign.MASK_32
        return xhsign.to_signed32(value) if signed else value

    # ------------------------------------------------------------------
    # alphabet codecs
    # ------------------------------------------------------------------
    @staticmethod
    def _translation(alphabet: str) -> tuple:
        tables = xhsign._TRANSLATIONS.get(alphabet)
        if tables is None:
            target = xhsign.ALPHABETS.get(alphabet)
            if target is None:
                raise ValueError(f"Unknown alphabet: {alphabet!r}")
            with xhsign._TABLE_LOCK:
                tables = xhsign._TRANSLATIONS.get(alphabet)
                if tables is None:
                    tables = (
                        str.maketrans(xhsign.STANDARD_ALPHABET, target),
                        str.maketrans(target, xhsign.STANDARD_ALPHABET),
                    )
                    xhsign._TRANSLATIONS[alphabet] = tables
        return tables

    @staticmethod
    def alphabet_encode(data, alphabet: str = "custom") -> str:
        raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
        encoded = xhsign.base64.b64encode(raw).decode("ascii")
        return encoded.translate(xhsign._translation(alphabet)[0])

    @staticmethod
    def alphabet_decode(text: str, alphabet: str = "custom") -> bytes:
        if not isinstance(text, str):
            raise TypeError(f"encoded text must be str, got {type(text).__name__}")
        standard = text.translate(xhsign._translation(alphabet)[1])
        try:
            return xhsign.base64.b64decode(standard, validate=True)
        except ValueError as exc:
            raise DecodeError(f"Invalid {alphabet} base64 payload") from exc

    @staticmethod
    def b64encode(text: str) -> str:
        return xhsign.alphabet_encode(text, "custom")

    @staticmethod
    def b64decode(text: str) -> str:
        raw = xhsign.alphabet_decode(text, "custom")
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError("Decoded payload is not valid UTF-8") from exc

    @staticmethod
    def b64encode_x3(data: bytes) -> str:
        return xhsign.alphabet_encode(data, "x3")

    @staticmethod
    def b64decode_x3(text: str) -> bytes:
        return xhsign.alphabet_decode(text, "x3")

    @staticmethod
    def b58encode(data) -> str:
        raw = bytes(data)
        alphabet = xhsign.BASE58_ALPHABET
        number = int.from_bytes(raw, "big")
        digits = []
        while number > 0:
            number, remainder = divmod(number, 58)
            digits.append(alphabet[remainder])
        digits.reverse()
        leading_zeros = len(raw) - len(raw.lstrip(b"\x00"))
        return alphabet[0] * leading_zeros + "".join(digits)

    # ------------------------------------------------------------------
    # hashing
    # ------------------------------------------------------------------
    @staticmethod
    def md5_hex(text: str) -> str:
        return xhsign.hashlib.md5(text.encode("utf-8")).hexdigest()

    @staticmethod
    def custom_hash_v2(data: bytes) -> bytes:
        """128-bit add/xor/rotate mix of 8-byte blocks; returns 16 bytes."""
        data = bytes(data)
        length = len(data)
        if length % 8:
            raise FormatError(f"custom hash input must be a multiple of 8 bytes, got {length}")
        mask = xhsign.MASK_32
        rotl = xhsign.rotl32
        s0, s1, s2, s3 = xhsign.HASH_IV
        s0 ^= length & mask
        s1 ^= (length << 8) & mask
        s2 ^= (length << 16) & mask
        s3 ^= (length << 24) & mask
        for offset in range(0, length, 8):
            v0, v1 = xhsign.struct.unpack_from("<II", data, offset)
            s0 = rotl(((s0 + v0) & mask) ^ s2, 7)
            s1 = rotl(((v0 ^ s1) + s3) & mask, 11)
            s2 = rotl(((s2 + v1) & mask) ^ s0, 13)
            s3 = rotl(((s3 ^ v1) + s1) & mask, 17)
        t0 = s0 ^ (length & mask)
        t1 = s1 ^ t0
        t2 = (s2 + t1) & mask
        t3 = s3 ^ t2
        r0, r1, r2, r3 = rotl(t0, 9), rotl(t1, 13), rotl(t2, 17), rotl(t3, 19)
        s0 = (r0 + r2) & mask
        s1 = r1 ^ r3
        s2 = (r2 + s0) & mask
        s3 = r3 ^ s1
        return xhsign.struct.pack("<4I", s0, s1, s2, s3)

    @staticmethod
    def rc4(key: bytes, data: bytes) -> bytes:
        return xhsign.ARC4.new(bytes(key)).encrypt(bytes(data))

    # ------------------------------------------------------------------
    # content string and payload
    # ------------------------------------------------------------------
    @staticmethod
    def _js_json_value(value):
        """Map floats onto what JSON.stringify emits: 1.0 -> 1, NaN/Infinity -> null."""
        if isinstance(value, float):
            if xhsign.math.isnan(value) or xhsign.math.isinf(value):
                return None
            if value.is_integer() and abs(value) < 1e21:
                return int(value)
            return value
        if isinstance(value, dict):
            return {key: xhsign._js_json_value(item) for key, item in value.items()}
        if isinstance(value, (list, tuple)):
            return [xhsign._js_json_value(item) for item in value]
        return value

    @staticmethod
    def json_compact(value) -> str:
        return xhsign.json.dumps(
            xhsign._js_json_value(value), separators=(",", ":"), ensure_ascii=False
        )

    @staticmethod
    def _js_scalar(value) -> str:
        if value is None:
            return "null"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)

    @staticmethod
    def _js_str(value) -> str:
        if value is None:
            return ""
        if isinstance(value, (list, tuple)):
            return ",".join(xhsign._js_scalar(item) for item in value)
        return xhsign._js_scalar(value)

    @staticmethod
    def _query_string(params: dict) -> str:
        items = list(params.items())
        if xhsign.SORT_QUERY:
            items.sort(key=lambda item: str(item[0]))
        # only '=' is escaped; ',' and everything else stays literal
        return "&".join(
            f"{key}={xhsign._js_str(value).replace('=', '%3D')}" for key, value in items
        )

    @staticmethod
    def build_content_string(method: str, uri: str, payload=None) -> str:
        payload = payload or {}
        if method.upper() == "POST":
            return uri + xhsign.json_compact(payload)
        if not payload:
            return uri
        return f"{uri}?{xhsign._query_string(payload)}"

    @staticmethod
    def api_path(content_string: str) -> str:
        cut = len(content_string)
        for marker in ("{", "?"):
            index = content_string.find(marker)
            if index != -1:
                cut = min(cut, index)
        return content_string[:cut]

    @staticmethod
    def _digest_bytes(d_value: str) -> bytes:
        if not isinstance(d_value, str) or len(d_value) != xhsign.EXPECTED_HEX_LENGTH:
            raise FormatError(f"hex parameter must be {xhsign.EXPECTED_HEX_LENGTH} characters")
        try:
            return bytes.fromhex(d_value)
        except ValueError as exc:
            raise FormatError("hex parameter contains non-hex characters") from exc

    @staticmethod
    def caller_stacklevel() -> int:
        """``stacklevel`` for a warning raised by the caller, pointing at the first frame outside this package."""
        package_dir = _os_module.path.dirname(_os_module.path.abspath(__file__))
        frame = xhsign.sys._getframe(1)
        level = 1
        while frame is not None:
            filename = _os_module.path.abspath(frame.f_code.co_filename)
            if _os_module.path.dirname(filename) != package_dir:
                break
            frame = frame.f_back
            level += 1
        return level

    @staticmethod
    def _fixed_frame(value: str, width: int, label: str) -> bytes:
        raw = value.encode("utf-8")
        if len(raw) > width:
            xhsign.warnings.warn(
                f"{label} is {len(raw)} bytes; truncated to the {width}-byte frame",
                UserWarning,
                stacklevel=xhsign.caller_stacklevel(),
            )
            raw = raw[:width]
        return bytes([width]) + raw.ljust(width, b"\x00")

    @staticmethod
    def _env_block(seed_byte: int) -> bytes:
        block = bytearray([xhsign.CHECKSUM_VERSION, seed_byte ^ xhsign.ENV_TABLE[0]])
        for i in range(1, len(xhsign.ENV_TABLE)):
            block.append(xhsign.ENV_TABLE[i] ^ xhsign.ENV_CHECKS_DEFAULT[i])
        return bytes(block)

    @staticmethod
    def build_payload(
        d_value: str,
        a1_value: str,
        app_id: str = "xhs-pc-web",
        content_string: str = "",
        timestamp: "xhsign.typing.Optional[float]" = None,
        sign_state: "xhsign.typing.Optional[xhsign.SignState]" = None,
        entropy: "xhsign.typing.Optional[xhsign.Entropy]" = None,
    ) -> bytes:
        """
        Assemble the 144-byte mns0301 payload.

        Layout (offsets): version 0, seed 4, timestamp 8, session block 16,
        digest 36, a1 frame 44, app id frame 97, env block 108, a3 tag 124.
        Random draws happen in a fixed order: seed, then (without a session)
        time offset, sequence value and window property count.
        """
        entropy = xhsign._entropy(entropy)
        digest = xhsign._digest_bytes(d_value)
        if timestamp is None:
            timestamp = entropy.now()
        le = xhsign.int_to_le
        timestamp_ms = int(timestamp * 1000)
        seed_bytes = le(entropy.seed32(), 4)
        seed_byte = seed_bytes[0]
        timestamp_bytes = le(timestamp_ms, xhsign.TIMESTAMP_LE_LENGTH)

        payload = bytearray(xhsign.VERSION_BYTES)
        payload += seed_bytes
        payload += timestamp_bytes
        if sign_state is not None:
            payload += le(sign_state.page_load_timestamp, 8)
            payload += le(sign_state.sequence_value, 4)
            payload += le(sign_state.window_props_length, 4)
            payload += le(sign_state.uri_length, 4)
        else:
            offset = entropy.randint(xhsign.TIME_OFFSET_MIN, xhsign.TIME_OFFSET_MAX)
            payload += le(int((timestamp - offset) * 1000), 8)
            payload += le(entropy.randint(xhsign.SEQUENCE_VALUE_MIN, xhsign.SEQUENCE_VALUE_MAX), 4)
            payload += le(entropy.randint(xhsign.WINDOW_PROPS_LENGTH_MIN, xhsign.WINDOW_PROPS_LENGTH_MAX), 4)
            payload += le(len(content_string.encode("utf-8")), 4)
        payload += bytes(b ^ seed_byte for b in digest[:xhsign.MD5_XOR_LENGTH])
        payload += xhsign._fixed_frame(a1_value, xhsign.A1_LENGTH, "a1")
        payload += xhsign._fixed_frame(app_id, xhsign.APP_ID_LENGTH, "app id")
        payload += xhsign._env_block(seed_byte)

        path_digest = xhsign.hashlib.md5(xhsign.api_path(content_string).encode("utf-8")).digest()
        tag = xhsign.custom_hash_v2(timestamp_bytes + path_digest)
        payload += bytes(xhsign.A3_PREFIX)
        payload += bytes(b ^ seed_byte for b in tag)
        return bytes(payload)

    # ------------------------------------------------------------------
    # fingerprint
    # ------------------------------------------------------------------
    class FingerprintEngine:
        """Synthesises a browser fingerprint record and its RC4-sealed b1 digest."""

        def __init__(self, entropy=None):
            self._entropy = xhsign._entropy(entropy)

        def weighted_choice(self, values, weights) -> str:
            remaining = self._entropy.random() * sum(weights)
            for value, weight in zip(values, weights):
                remaining -= weight
                if remaining <= 0:
                    return str(value)
            return str(values[-1])

        def renderer_info(self) -> "xhsign.typing.Tuple[str, str]":
            vendor, renderer = self._entropy.choice(xhsign.catalog.GPU_VENDORS).split("|", 1)
            return vendor, renderer

        def screen_config(self) -> dict:
            table = xhsign.catalog.SCREEN_RESOLUTIONS
            width, height = (
                int(part) for part in self.weighted_choice(table["resolutions"], table["weights"]).split(";")
            )
            avail_width, avail_height = width, height
            if self._entropy.random() < 0.5:
                avail_width -= int(self.weighted_choice(*xhsign.catalog.AVAIL_WIDTH_OFFSETS))
            else:
                avail_height -= int(self.weighted_choice(*xhsign.catalog.AVAIL_HEIGHT_OFFSETS))
            return {
                "width": width,
                "height": height,
                "avail_width": avail_width,
                "avail_height": avail_height,
            }

        def webgl_hash(self) -> str:
            return xhsign.hashlib.md5(self._entropy.token_bytes(32)).hexdigest()

        @staticmethod
        def canvas_hash() -> str:
            return xhsign.catalog.CANVAS_HASH

        @staticmethod
        def cookie_string(cookies: dict) -> str:
            return "; ".join(f"{key}={value}" for key, value in cookies.items())

        def generate(self, cookies: dict, user_agent: "xhsign.typing.Optional[str]" = None) -> dict:
            cat = xhsign.catalog
            user_agent = user_agent or xhsign.USER_AGENT
            screen = self.screen_config()
            incognito = self.weighted_choice(*cat.INCOGNITO_OPTIONS)
            vendor, renderer = self.renderer_info()
            x78_y = self._entropy.randint(2350, 2449)
            return {
                "x1": user_agent,
                "x2": "false",
                "x3": "zh-CN",
                "x4": self.weighted_choice(cat.COLOR_DEPTH_OPTIONS["values"], cat.COLOR_DEPTH_OPTIONS["weights"]),
                "x5": self.weighted_choice(cat.DEVICE_MEMORY_OPTIONS["values"], cat.DEVICE_MEMORY_OPTIONS["weights"]),
                "x6": "24",
                "x7": f"{vendor},{renderer}",
                "x8": self.weighted_choice(cat.CORE_OPTIONS["values"], cat.CORE_OPTIONS["weights"]),
                "x9": f"{screen['width']};{screen['height']}",
                "x10": f"{screen['avail_width']};{screen['avail_height']}",
                "x11": "-480",
                "x12": "Asia/Shanghai",
                "x13": incognito,
                "x14": incognito,
                "x15": incognito,
                "x16": "false",
                "x17": "false",
                "x18": "un",
                "x19": "Win32",
                "x20": "",
                "x21": cat.BROWSER_PLUGINS,
                "x22": self.webgl_hash(),
                "x23": "false",
                "x24": "false",
                "x25": "false",
                "x26": "false",
                "x27": "false",
                "x28": "0,false,false",
                "x29": "4,7,8",
                "x30": "swf object not loaded",
                "x33": "0",
                "x34": "0",
                "x35": "0",
                "x36": str(self._entropy.randint(1, 20)),
                "x37": "0|0|0|0|0|0|0|0|0|1|0|0|0|0|0|0|0|0|1|0|0|0|0|0",
                "x38": "0|0|1|0|1|0|0|0|0|0|1|0|1|0|1|0|0|0|0|0|0|0|0|0|0|0|0|0|0|0|0|0|0|0|0|0|0|0|0",
                "x39": 0,
                "x40": "0",
                "x41": "0",
                "x42": "3.4.4",
                "x43": self.canvas_hash(),
                "x44": str(self._entropy.now_ms()),
                "x45": "__SEC_CAV__1-1-1-1-1|__SEC_WSA__|",
                "x46": "false",
                "x47": "1|0|0|0|0|0",
                "x48": "",
                "x49": "{list:[],type:}",
                "x50": "",
                "x51": "",
                "x52": "",
                "x55": "380,380,360,400,380,400,420,380,400,400,360,360,440,420",
                "x56": f"{vendor}|{renderer}|{self.webgl_hash()}|35",
                "x57": self.cookie_string(cookies),
                "x58": "180",
                "x59": "2",
                "x60": "63",
                "x61": "1291",
                "x62": "2047",
                "x63": "0",
                "x64": "0",
                "x65": "0",
                "x66": {"referer": "", "location": cat.EXPLORE_URL, "frame": 0},
                "x67": "1|0",
                "x68": "0",
                "x69": "326|1292|30",
                "x70": ["location"],
                "x71": "true",
                "x72": "complete",
                "x73": "1191",
                "x74": "0|0|0",
                "x75": "Google Inc.",
                "x76": "true",
                "x77": "1|1|1|1|1|1|1|1|1|1",
                "x78": {
                    "x": 0,
                    "y": x78_y,
                    "left": 0,
                    "right": 290.828125,
                    "bottom": x78_y + 18,
                    "height": 18,
                    "top": x78_y,
                    "width": 290.828125,
                    "font": cat.FONTS,
                },
                "x82": "_0x17a2|_0x1954",
                "x31": "124.04347527516074",
                "x79": "144|599565058866",
                "x53": self.webgl_hash(),
                "x54": cat.VOICE_HASH_OPTIONS,
                "x80": "1|[object FileSystemDirectoryHandle]",
            }

        def update(self, fp: dict, cookies: dict, url: str) -> dict:
            fp["x39"] = 0
            fp["x44"] = str(self._entropy.now_ms())
            fp["x57"] = self.cookie_string(cookies)
            fp["x66"] = {"referer": xhsign.catalog.EXPLORE_URL, "location": url, "frame": 0}
            return fp

        def generate_b1(self, fp: dict) -> str:
            subset = {}
            for field in xhsign.catalog.B1_FIELDS:
                if field in fp:
                    subset[field] = fp[field]
            sealed = xhsign.rc4(xhsign.B1_SECRET_KEY, xhsign.json_compact(subset).encode("utf-8"))
            codes = xhsign.percent_codes(xhsign.quote_b1(sealed))
            return xhsign.b64encode(xhsign.json_compact(codes))

    @staticmethod
    def quote_b1(raw: bytes) -> str:
        safe = xhsign.B1_SAFE_CHARS
        return "".join(chr(b) if chr(b) in safe else f"%{b:02X}" for b in bytes(raw))

    @staticmethod
    def percent_codes(text: str) -> list:
        codes = []
        i = 0
        while i < len(text):
            if text[i] == "%":
                codes.append(int(text[i + 1:i + 3], 16))
                i += 3
            else:
                codes.append(ord(text[i]))
                i += 1
        return codes

    # ------------------------------------------------------------------
    # validation and request helpers
    # ------------------------------------------------------------------
    @staticmethod
    def validate_method(method) -> str:
        if not isinstance(method, str):
            raise TypeError(f"method must be str, got {type(method).__name__}")
        normalized = method.strip().upper()
        if normalized not in ("GET", "POST"):
            raise ValidationError(f"method must be 'GET' or 'POST', got '{method}'")
        return normalized

    @staticmethod
    def validate_required_str(value, name: str) -> str:
        if not isinstance(value, str):
            raise TypeError(f"{name} must be str, got {type(value).__name__}")
        if not value.strip():
            raise ValidationError(f"{name} cannot be empty")
        return value

    @staticmethod
    def validate_payload(payload) -> "xhsign.typing.Optional[dict]":
        if payload is None:
            return None
        if not isinstance(payload, dict):
            raise TypeError(f"payload must be dict or None, got {type(payload).__name__}")
        for key in payload:
            if not isinstance(key, str):
                raise TypeError(f"payload keys must be str, got {type(key).__name__} for key {key!r}")
        return payload

    @staticmethod
    def validate_cookies(cookies):
        if not isinstance(cookies, (dict, str)):
            raise TypeError(f"cookies must be dict or str, got {type(cookies).__name__}")
        if isinstance(cookies, dict):
            for key in cookies:
                if not isinstance(key, str):
                    raise TypeError(f"cookie keys must be str, got {type(key).__name__} for key {key!r}")
        return cookies

    @staticmethod
    def parse_cookies(cookies) -> dict:
        cookies = xhsign.validate_cookies(cookies)
        if isinstance(cookies, dict):
            return dict(cookies)
        parsed = {}
        for pair in cookies.split(";"):
            pair = pair.strip()
            index = pair.find("=")
            if index > 0:
                parsed[pair[:index].strip()] = pair[index + 1:].strip()
        return parsed

    @staticmethod
    def extract_uri(url: str) -> str:
        url = xhsign.validate_required_str(url, "uri").strip()
        if url.startswith(("http://", "https://")):
            path = xhsign.urllib.parse.urlsplit(url).path
        else:
            path = url.split("?", 1)[0]
        if not path or path == "/":
            raise ValidationError(f"Cannot extract valid URI path from URL: {url}")
        return path

    @staticmethod
    def build_url(base_url: str, params: "xhsign.typing.Optional[dict]" = None) -> str:
        base_url = xhsign.validate_required_str(base_url, "base_url")
        if not params:
            return base_url
        query = xhsign._query_string(params)
        if "?" not in base_url:
            separator = "?"
        elif base_url.endswith(("?", "&")):
            separator = ""
        else:
            separator = "&"
        return f"{base_url}{separator}{query}"

    @staticmethod
    def build_json_body(payload: dict) -> str:
        return xhsign.json_compact(payload)

    @staticmethod
    def get_x_t(timestamp: "xhsign.typing.Optional[float]" = None, entropy=None) -> int:
        if timestamp is None:
            timestamp = xhsign._entropy(entropy).now()
        return int(xhsign.math.floor(timestamp * 1000))

    @staticmethod
    def b3_trace_id(entropy=None) -> str:
        entropy = xhsign._entropy(entropy)
        return "".join(entropy.choice(xhsign.HEX_CHARS) for _ in range(xhsign.B3_TRACE_ID_LENGTH))

    @staticmethod
    def xray_trace_id(timestamp: "xhsign.typing.Optional[int]" = None, seq: "xhsign.typing.Optional[int]" = None, entropy=None) -> str:
        entropy = xhsign._entropy(entropy)
        if timestamp is None:
            timestamp = entropy.now_ms()
        if seq is None:
            seq = entropy.randint(0, xhsign.XRAY_TRACE_ID_SEQ_MAX)
        combined = (int(timestamp) << xhsign.XRAY_TRACE_ID_TIMESTAMP_SHIFT) | int(seq)
        head = format(combined, f"0{xhsign.XRAY_TRACE_ID_PART_LENGTH}x")
        tail = "".join(entropy.choice(xhsign.HEX_CHARS) for _ in range(xhsign.XRAY_TRACE_ID_PART_LENGTH))
        return head + tail

    # ------------------------------------------------------------------
    # signatures
    # ------------------------------------------------------------------
    @staticmethod
    def sign_x3(
        d_value: str,
        a1_value: str,
        app_id: str = "xhs-pc-web",
        content_string: str = "",
        timestamp=None,
        sign_state=None,
        entropy=None,
        protocol: "xhsign.typing.Optional[str]" = None,
    ) -> str:
        protocol = (protocol or xhsign.DEFAULT_PROTOCOL).lower()
        if protocol == xhsign.PROTOCOL_LEGACY:
            from . import legacy
            return legacy.sign_x3(d_value, a1_value, app_id, content_string, timestamp, entropy)
        if protocol != xhsign.PROTOCOL_CURRENT:
            raise ValidationError(f"Unsupported protocol version: {protocol!r}")
        payload = xhsign.build_payload(
            d_value, a1_value, app_id, content_string, timestamp, sign_state, entropy
        )
        transformed = xhsign.xor_transform(payload)[:xhsign.PAYLOAD_LENGTH]
        return xhsign.X3_PREFIX + xhsign.b64encode_x3(transformed)

    @staticmethod
    def sign_xs(
        method: str,
        uri: str,
        a1_value: str,
        xsec_appid: "xhsign.typing.Optional[str]" = None,
        payload: "xhsign.typing.Optional[dict]" = None,
        timestamp: "xhsign.typing.Optional[float]" = None,
        session: "xhsign.typing.Optional[xhsign.SessionState]" = None,
        *,
        entropy=None,
        protocol: "xhsign.typing.Optional[str]" = None,
    ) -> str:
        method = xhsign.validate_method(method)
        a1_value = xhsign.validate_required_str(a1_value, "a1_value")
        xsec_appid = xhsign.validate_required_str(
            xsec_appid if xsec_appid is not None else xhsign.DEFAULT_APP_ID, "xsec_appid"
        )
        payload = xhsign.validate_payload(payload)
        uri = xhsign.extract_uri(uri)

        content_string = xhsign.build_content_string(method, uri, payload)
        d_value = xhsign.md5_hex(content_string)
        sign_state = session.advance(uri) if session is not None else None

        data = dict(xhsign.SIGNATURE_DATA_TEMPLATE)
        data["x1"] = xsec_appid
        data["x3"] = xhsign.sign_x3(
            d_value, a1_value, xsec_appid, content_string, timestamp, sign_state, entropy, protocol
        )
        return xhsign.XYS_PREFIX + xhsign.b64encode(xhsign.json_compact(data))

    @staticmethod
    def sign_xs_get(uri, a1_value, xsec_appid=None, params=None, timestamp=None, session=None, **kwargs) -> str:
        return xhsign.sign_xs("GET", uri, a1_value, xsec_appid, params, timestamp, session, **kwargs)

    @staticmethod
    def sign_xs_post(uri, a1_value, xsec_appid=None, payload=None, timestamp=None, session=None, **kwargs) -> str:
        return xhsign.sign_xs("POST", uri, a1_value, xsec_appid, payload, timestamp, session, **kwargs)

    @staticmethod
    def sign_xs_common(cookies, fingerprint: "xhsign.typing.Optional[dict]" = None, entropy=None) -> str:
        cookies = xhsign.parse_cookies(cookies)
        a1_value = cookies.get("a1")
        if not a1_value:
            raise ValidationError("Missing 'a1' in cookies")
        engine = xhsign.FingerprintEngine(entropy)
        if fingerprint is None:
            fingerprint = engine.generate(cookies, xhsign.USER_AGENT)
        b1 = engine.generate_b1(fingerprint)

        data = dict(xhsign.SIGNATURE_XSCOMMON_TEMPLATE)
        data["x5"] = a1_value
        data["x8"] = b1
        data["x9"] = xhsign.crc32_js(b1, mode="js", signed=True)
        return xhsign.b64encode(xhsign.json_compact(data))

    @staticmethod
    def sign_xsc(cookies, **kwargs) -> str:
        xhsign.validate_cookies(cookies)
        return xhsign.sign_xs_common(cookies, **kwargs)

    @staticmethod
    def sign_headers(
        method: str,
        uri: str,
        cookies,
        xsec_appid: "xhsign.typing.Optional[str]" = None,
        params: "xhsign.typing.Optional[dict]" = None,
        payload: "xhsign.typing.Optional[dict]" = None,
        timestamp: "xhsign.typing.Optional[float]" = None,
        session=None,
        *,
        entropy=None,
        protocol=None,
    ) -> dict:
        entropy = xhsign._entropy(entropy)
        if timestamp is None:
            timestamp = entropy.now()
        method = xhsign.validate_method(method)
        if method == "GET":
            if payload is not None:
                raise ValidationError("GET requests must use 'params', not 'payload'")
            request_data = params
        else:
            if params is not None:
                raise ValidationError("POST requests must use 'payload', not 'params'")
            request_data = payload

        cookie_dict = xhsign.parse_cookies(cookies)
        a1_value = cookie_dict.get("a1")
        if not a1_value:
            raise ValidationError("Missing 'a1' in cookies")

        x_s = xhsign.sign_xs(
            method, uri, a1_value, xsec_appid, request_data, timestamp, session,
            entropy=entropy, protocol=protocol
        )
        x_t = xhsign.get_x_t(timestamp)
        return {
            "x-s": x_s,
            "x-s-common": xhsign.sign_xs_common(cookie_dict, entropy=entropy),
            "x-t": str(x_t),
            "x-b3-traceid": xhsign.b3_trace_id(entropy),
            "x-xray-traceid": xhsign.xray_trace_id(x_t, entropy=entropy),
        }

    @staticmethod
    def sign_headers_get(uri, cookies, xsec_appid=None, params=None, timestamp=None, session=None, **kwargs) -> dict:
        return xhsign.sign_headers("GET", uri, cookies, xsec_appid, params, None, timestamp, session, **kwargs)

    @staticmethod
    def sign_headers_post(uri, cookies, xsec_appid=None, payload=None, timestamp=None, session=None, **kwargs) -> dict:
        return xhsign.sign_headers("POST", uri, cookies, xsec_appid, None, payload, timestamp, session, **kwargs)

    # ------------------------------------------------------------------
    # decoding
    # ------------------------------------------------------------------
    @staticmethod
    def decode_x3(signature: str) -> bytes:
        from . import legacy
        if signature.startswith(legacy.X3_PREFIX):
            return legacy.decode_x3(signature)
        if signature.startswith(xhsign.X3_PREFIX):
            signature = signature[len(xhsign.X3_PREFIX):]
        return xhsign.xor_transform(xhsign.b64decode_x3(signature))

    @staticmethod
    def _loads(text: str) -> dict:
        try:
            return xhsign.json.loads(text)
        except ValueError as exc:
            raise DecodeError(f"Invalid signature: JSON decode failed - {exc}") from exc

    @staticmethod
    def decode_xs(signature: str) -> dict:
        if signature.startswith(xhsign.XYS_PREFIX):
            signature = signature[len(xhsign.XYS_PREFIX):]
        return xhsign._loads(xhsign.b64decode(signature))

    @staticmethod
    def decode_xs_common(signature: str) -> dict:
        return xhsign._loads(xhsign.b64decode(signature))


# PROTOCOLS:
# MNS0301 - sign_x3/decode_x3, 144-byte payload, x3 alphabet  (current)
# MNS0101 - legacy.sign_x3/legacy.decode_x3, base58           (deprecated)
# XYS     - sign_xs/decode_xs envelope around x3
# XSC     - sign_xs_common/decode_xs_common fingerprint envelope


def _load_data(raw: "str | None"):
    if not raw:
        return None
    data = xhsign.json.loads(raw)
    if not isinstance(data, dict):
        raise ValidationError("--data must be a JSON object")
    return data


def cli(argv=None) -> int:
    import argparse
    import sys

    parser = argparse.ArgumentParser(prog="xhsign", description="XHSIGN request signature toolkit")
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_request_args(sub, with_cookies: bool) -> None:
        sub.add_argument("uri", help="Request path or full URL")
        sub.add_argument("-m", "--method", default="GET", help="HTTP method: GET or POST")
        sub.add_argument("-d", "--data", default=None, help="Query params (GET) or body (POST) as JSON")
        sub.add_argument("--app-id", dest="app_id", default=None, help="xsec_appid embedded in the signature")
        sub.add_argument("-t", "--timestamp", type=float, default=None, help="Unix timestamp in seconds")
        sub.add_argument("--protocol", default=None, help="Signature protocol: mns0301 (default) or mns0101")
        if with_cookies:
            sub.add_argument("-c", "--cookies", required=True, help="Cookie header text or JSON object (needs a1)")
        else:
            sub.add_argument("--a1", required=True, help="a1 cookie value")

    add_request_args(subparsers.add_parser("sign", help="Produce an x-s signature"), with_cookies=False)
    add_request_args(subparsers.add_parser("headers", help="Produce the full signed header set"), with_cookies=True)
    common = subparsers.add_parser("common", help="Produce an x-s-common signature")
    common.add_argument("-c", "--cookies", required=True, help="Cookie header text or JSON object (needs a1)")
    decode = subparsers.add_parser("decode", help="Decode an x-s, x3 or x-s-common value")
    decode.add_argument("signature", help="Signature text")

    args = parser.parse_args(argv)

    def cookies_arg(raw: str):
        stripped = raw.strip()
        return xhsign.json.loads(stripped) if stripped.startswith("{") else stripped

    try:
        if args.command == "sign":
            result = xhsign.sign_xs(
                args.method,
                args.uri,
                args.a1,
                args.app_id,
                _load_data(args.data),
                args.timestamp,
                protocol=args.protocol,
            )
        elif args.command == "headers":
            method = xhsign.validate_method(args.method)
            data = _load_data(args.data)
            result = xhsign.sign_headers(
                method,
                args.uri,
                cookies_arg(args.cookies),
                args.app_id,
                params=data if method == "GET" else None,
                payload=data if method == "POST" else None,
                timestamp=args.timestamp,
                protocol=args.protocol,
            )
        elif args.command == "common":
            result = xhsign.sign_xsc(cookies_arg(args.cookies))
        else:
            text = args.signature.strip()
            if text.startswith(xhsign.XYS_PREFIX):
                result = xhsign.decode_xs(text)
            elif text.startswith("mns"):
                result = xhsign.decode_x3(text).hex()
            else:
                result = xhsign.decode_xs_common(text)
    except (ValueError, TypeError) as exc:
        print(f"xhsign: error: {exc}", file=sys.stderr)
        return 1

    if isinstance(result, dict):
        print(xhsign.json.dumps(result, indent=2, ensure_ascii=False))
    else:
        print(result)
    return 0


def main(argv=None) -> int:
    return cli(argv)


__all__ = [
    "DecodeError",
    "FormatError",
    "SignatureError",
    "ValidationError",
    "cli",
    "main",
    "xhsign",
]


if __name__ == "__main__":
    raise SystemExit(main())
