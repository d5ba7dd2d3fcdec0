"""Wire-level constants and fixed-size structures of the RFB protocol."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass
from typing import ClassVar

VERSION_MESSAGE = b"RFB 003.008\n"

ENCODING_JPEG_HIGHQ = -23
ENCODING_JPEG_LOWQ = -32


class SecurityType(enum.IntEnum):
    INVALID = 0
    NONE = 1
    VNC_AUTH = 2
    RSA_AES = 5
    TIGHT = 16
    VENCRYPT = 19
    APPLE_DH = 30
    RSA_AES256 = 129


class SecurityHandshakeResult(enum.IntEnum):
    OK = 0
    FAILED = 1


class ClientMessageType(enum.IntEnum):
    SET_PIXEL_FORMAT = 0
    SET_ENCODINGS = 2
    FRAMEBUFFER_UPDATE_REQUEST = 3
    KEY_EVENT = 4
    POINTER_EVENT = 5
    CLIENT_CUT_TEXT = 6
    ENABLE_CONTINUOUS_UPDATES = 150
    NTP = 160
    FENCE = 248
    SET_DESKTOP_SIZE = 251
    QEMU = 255


class QemuMessageType(enum.IntEnum):
    KEY_EVENT = 0


class Encoding(enum.IntEnum):
    RAW = 0
    COPYRECT = 1
    RRE = 2
    HEXTILE = 5
    TIGHT = 7
    TRLE = 15
    ZRLE = 16
    OPEN_H264 = 50
    CURSOR = -239
    DESKTOPSIZE = -223
    QEMU_EXT_KEY_EVENT = -258
    QEMU_LED_STATE = -261
    EXTENDEDDESKTOPSIZE = -308
    FENCE = -312
    CONTINUOUSUPDATES = -313
    EXT_MOUSE_BUTTONS = -316
    PTS = -1000
    NTP = -1001
    VMWARE_LED_STATE = 0x574D5668
    # 0xc0a1e5ce seen as a signed 32-bit value
    EXTENDED_CLIPBOARD = -1063131698


class ServerMessageType(enum.IntEnum):
    FRAMEBUFFER_UPDATE = 0
    SET_COLOUR_MAP_ENTRIES = 1
    BELL = 2
    SERVER_CUT_TEXT = 3
    END_OF_CONTINUOUS_UPDATES = 150
    NTP = 160
    FENCE = 248


class VencryptSubtype(enum.IntEnum):
    PLAIN = 256
    TLS_NONE = 257
    TLS_VNC = 258
    TLS_PLAIN = 259
    X509_NONE = 260
    X509_VNC = 261
    X509_PLAIN = 262


class ResizeInitiator(enum.IntEnum):
    SERVER = 0
    THIS_CLIENT = 1
    OTHER_CLIENT = 2


class ResizeStatus(enum.IntEnum):
    SUCCESS = 0
    PROHIBITED = 1
    OUT_OF_RESOURCES = 2
    INVALID_LAYOUT = 3
    REQUEST_FORWARDED = 4


class RsaAesCredSubtype(enum.IntEnum):
    USER_AND_PASS = 1
    ONLY_PASS = 2


class LedState(enum.IntFlag):
    """LED state bits, shared by the QEMU and VMware extensions."""

    SCROLL_LOCK = 1 << 0
    NUM_LOCK = 1 << 1
    CAPS_LOCK = 1 << 2


class ExtClipboardFlags(enum.IntFlag):
    FORMAT_TEXT = 1 << 0
    FORMAT_RTF = 1 << 1
    FORMAT_HTML = 1 << 2
    FORMAT_DIB = 1 << 3
    FORMAT_FILES = 1 << 4
    CAPS = 1 << 24
    ACTION_REQUEST = 1 << 25
    ACTION_PEEK = 1 << 26
    ACTION_NOTIFY = 1 << 27
    ACTION_PROVIDE = 1 << 28
    ACTION_ALL = ACTION_REQUEST | ACTION_PEEK | ACTION_NOTIFY | ACTION_PROVIDE


class FenceFlags(enum.IntFlag):
    BLOCK_BEFORE = 1 << 0
    BLOCK_AFTER = 1 << 1
    SYNC_NEXT = 1 << 2
    REQUEST = 1 << 31
    MASK = BLOCK_BEFORE | BLOCK_AFTER | SYNC_NEXT


def _unpack(layout: struct.Struct, data: bytes, name: str) -> tuple:
    if len(data) < layout.size:
        raise ValueError(
            f"{name} needs {layout.size} bytes, got {len(data)}")
    return layout.unpack_from(data)


@dataclass(frozen=True)
class PixelFormat:
    """The 16-byte pixel format description."""

    bits_per_pixel: int
    depth: int
    big_endian: bool
    true_colour: bool
    red_max: int
    green_max: int
    blue_max: int
    red_shift: int
    green_shift: int
    blue_shift: int

    STRUCT: ClassVar[struct.Struct] = struct.Struct(">BBBBHHHBBB3x")

    def pack(self) -> bytes:
        return self.STRUCT.pack(
            self.bits_per_pixel, self.depth, int(self.big_endian),
            int(self.true_colour), self.red_max, self.green_max,
            self.blue_max, self.red_shift, self.green_shift, self.blue_shift)

    @classmethod
    def unpack(cls, data: bytes) -> PixelFormat:
        (bpp, depth, big_endian, true_colour, red_max, green_max, blue_max,
         red_shift, green_shift, blue_shift) = _unpack(
            cls.STRUCT, data, "pixel format")
        return cls(bpp, depth, bool(big_endian), bool(true_colour), red_max,
                   green_max, blue_max, red_shift, green_shift, blue_shift)


@dataclass(frozen=True)
class Screen:
    """One screen entry of an extended desktop size message."""

    id: int
    x: int
    y: int
    width: int
    height: int
    flags: int = 0

    STRUCT: ClassVar[struct.Struct] = struct.Struct(">IHHHHI")

    def pack(self) -> bytes:
        return self.STRUCT.pack(self.id, self.x, self.y, self.width,
                                self.height, self.flags)

    @classmethod
    def unpack(cls, data: bytes) -> Screen:
        return cls(*_unpack(cls.STRUCT, data, "screen"))


@dataclass(frozen=True)
class FramebufferRect:
    """The header of one rectangle in a framebuffer update."""

    x: int
    y: int
    width: int
    height: int
    encoding: int

    STRUCT: ClassVar[struct.Struct] = struct.Struct(">HHHHi")

    def pack(self) -> bytes:
        return self.STRUCT.pack(self.x, self.y, self.width, self.height,
                                int(self.encoding))

    @classmethod
    def unpack(cls, data: bytes) -> FramebufferRect:
        x, y, width, height, encoding = _unpack(cls.STRUCT, data,
                                                "framebuffer rectangle")
        try:
            encoding = Encoding(encoding)
        except ValueError:
            pass
        return cls(x, y, width, height, encoding)