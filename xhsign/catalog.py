"""Static browser profile catalogs used to synthesise fingerprints.

Every table is a plain immutable value: tuples for option lists and
``(values, weights)`` pairs for weighted draws.
"""

COLOR_DEPTH_OPTIONS = {
    "values": (16, 24, 30, 32),
    "weights": (0.05, 0.6, 0.05, 0.3),
}

DEVICE_MEMORY_OPTIONS = {
    "values": (1, 2, 4, 8),
    "weights": (0.1, 0.25, 0.4, 0.25),
}

CORE_OPTIONS = {
    "values": (2, 4, 6, 8, 12, 16),
    "weights": (0.1, 0.4, 0.2, 0.15, 0.1, 0.05),
}

SCREEN_RESOLUTIONS = {
    "resolutions": ("1366;768", "1600;900", "1920;1080", "2560;1440", "3840;2160"),
    "weights": (0.25, 0.15, 0.35, 0.15, 0.1),
}

# (offsets, weights) for the taskbar carved out of the screen
AVAIL_WIDTH_OFFSETS = ((0, 30, 60, 80), (0.1, 0.4, 0.3, 0.2))
AVAIL_HEIGHT_OFFSETS = ((30, 60, 80, 100), (0.2, 0.5, 0.2, 0.1))

INCOGNITO_OPTIONS = (("true", "false"), (0.95, 0.05))

GPU_VENDORS = (
    "Google Inc. (Intel)|ANGLE (Intel, Intel(R) UHD Graphics 620 (0x00005917) Direct3D11 vs_5_0 ps_5_0, D3D11)",
    "Google Inc. (Intel)|ANGLE (Intel, Intel(R) Iris(R) Xe Graphics (0x00009A49) Direct3D11 vs_5_0 ps_5_0, D3D11)",
    "Google Inc. (NVIDIA)|ANGLE (NVIDIA, NVIDIA GeForce GTX 1660 SUPER (0x000021C4) Direct3D11 vs_5_0 ps_5_0, D3D11)",
    "Google Inc. (NVIDIA)|ANGLE (NVIDIA, NVIDIA GeForce RTX 3060 (0x00002503) Direct3D11 vs_5_0 ps_5_0, D3D11)",
    "Google Inc. (NVIDIA)|ANGLE (NVIDIA, NVIDIA GeForce RTX 4070 (0x00002786) Direct3D11 vs_5_0 ps_5_0, D3D11)",
    "Google Inc. (AMD)|ANGLE (AMD, AMD Radeon(TM) Graphics (0x00001638) Direct3D11 vs_5_0 ps_5_0, D3D11)",
    "Google Inc. (AMD)|ANGLE (AMD, AMD Radeon RX 6600 (0x000073FF) Direct3D11 vs_5_0 ps_5_0, D3D11)",
)

BROWSER_PLUGINS = (
    "PDF Viewer,Chrome PDF Viewer,Chromium PDF Viewer,"
    "Microsoft Edge PDF Viewer,WebKit built-in PDF"
)

CANVAS_HASH = "742cc32c"

VOICE_HASH_OPTIONS = "10311144241322244122"

FONTS = (
    'system-ui, "Apple Color Emoji", "Segoe UI Emoji", "Segoe UI Symbol", '
    '"Noto Color Emoji", -apple-system, "Segoe UI", Roboto, Ubuntu, Cantarell, '
    '"Noto Sans", sans-serif, BlinkMacSystemFont, "Helvetica Neue", Arial, '
    '"PingFang SC", "PingFang TC", "PingFang HK", "Microsoft Yahei", "Microsoft JhengHei"'
)

EXPLORE_URL = "https://www.xiaohongshu.com/explore"

# Fields copied into the b1 sub-record, in serialisation order.
B1_FIELDS = (
    "x33", "x34", "x35", "x36", "x37", "x38", "x39",
    "x42", "x43", "x44", "x45", "x46",
    "x48", "x49", "x50", "x51", "x52", "x82",
)

__all__ = [
    "AVAIL_HEIGHT_OFFSETS",
    "AVAIL_WIDTH_OFFSETS",
    "B1_FIELDS",
    "BROWSER_PLUGINS",
    "CANVAS_HASH",
    "COLOR_DEPTH_OPTIONS",
    "CORE_OPTIONS",
    "DEVICE_MEMORY_OPTIONS",
    "EXPLORE_URL",
    "FONTS",
    "GPU_VENDORS",
    "INCOGNITO_OPTIONS",
    "SCREEN_RESOLUTIONS",
    "VOICE_HASH_OPTIONS",
]
