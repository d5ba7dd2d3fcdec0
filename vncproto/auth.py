"""Security handshake results and the VeNCrypt X509-Plain negotiation."""

from __future__ import annotations

import enum
import logging
import struct
from collections.abc import Callable
from dataclasses import dataclass

from vncproto.rfbproto import SecurityHandshakeResult, VencryptSubtype

log = logging.getLogger(__name__)

_U32 = struct.Struct(">I")
_PLAIN_AUTH_HEADER = struct.Struct(">II")
_MAX_CREDENTIAL_LEN = 255

VENCRYPT_MAJOR = 0
VENCRYPT_MINOR = 2


def handshake_failed_message(reason: str | bytes) -> bytes:
    """The security result telling the client that the handshake failed."""
    text = reason.encode("utf-8") if isinstance(reason, str) else bytes(reason)
    return (_U32.pack(SecurityHandshakeResult.FAILED) + _U32.pack(len(text))
            + text)


def handshake_ok_message() -> bytes:
    """The security result telling the client that the handshake succeeded."""
    return _U32.pack(SecurityHandshakeResult.OK)


class VencryptState(enum.Enum):
    WAITING_FOR_VERSION = enum.auto()
    WAITING_FOR_SUBTYPE = enum.auto()
    WAITING_FOR_PLAIN_AUTH = enum.auto()
    AUTHENTICATED = enum.auto()
    CLOSED = enum.auto()


@dataclass(frozen=True)
class HandshakeStep:
    """What handling one message produced.

    consumed is 0 when the buffered data does not yet hold a whole message.
    upgrade_tls asks the caller to switch the stream to TLS after sending the
    reply; close asks the caller to close the connection after sending it.
    """

    consumed: int
    reply: bytes = b""
    upgrade_tls: bool = False
    close: bool = False


class HandshakeFailed(Exception):
    """The handshake failed; reply is to be sent before closing."""

    def __init__(self, reason: str, reply: bytes, username: str | None = None):
        super().__init__(reason)
        self.reason = reason
        self.reply = reply
        self.username = username


def _credential(raw: bytes) -> str:
    raw = raw[:_MAX_CREDENTIAL_LEN].split(b"\0", 1)[0]
    return raw.decode("utf-8", errors="replace")


class VencryptHandshake:
    """Server side of VeNCrypt 0.2 offering only the X509-Plain subtype."""

    def __init__(self, auth_fn: Callable[[str, str], bool]) -> None:
        self._auth_fn = auth_fn
        self.state = VencryptState.WAITING_FOR_VERSION
        self.username: str | None = None

    def version_message(self) -> bytes:
        """The server's VeNCrypt version, sent first."""
        return bytes((VENCRYPT_MAJOR, VENCRYPT_MINOR))

    def _fail(self, reason: str, username: str | None = None) -> HandshakeFailed:
        if username is None:
            log.info("Security handshake: %s", reason)
        else:
            log.info('Security handshake failed for "%s": %s', username, reason)
        self.state = VencryptState.CLOSED
        return HandshakeFailed(reason, handshake_failed_message(reason),
                               username)

    def _on_version(self, data: bytes) -> HandshakeStep:
        if len(data) < 2:
            return HandshakeStep(0)
        if (data[0], data[1]) != (VENCRYPT_MAJOR, VENCRYPT_MINOR):
            raise self._fail("Unsupported VeNCrypt version")
        reply = b"\x00" + bytes((1,)) + _U32.pack(VencryptSubtype.X509_PLAIN)
        self.state = VencryptState.WAITING_FOR_SUBTYPE
        return HandshakeStep(2, reply)

    def _on_subtype(self, data: bytes) -> HandshakeStep:
        if len(data) < _U32.size:
            return HandshakeStep(0)
        (subtype,) = _U32.unpack_from(data)
        if subtype != VencryptSubtype.X509_PLAIN:
            self.state = VencryptState.CLOSED
            return HandshakeStep(_U32.size, b"\x00", close=True)
        self.state = VencryptState.WAITING_FOR_PLAIN_AUTH
        return HandshakeStep(_U32.size, b"\x01", upgrade_tls=True)

    def _on_plain_auth(self, data: bytes) -> HandshakeStep:
        header = _PLAIN_AUTH_HEADER.size
        if len(data) < header:
            return HandshakeStep(0)
        ulen, plen = _PLAIN_AUTH_HEADER.unpack_from(data)
        total = header + ulen + plen
        if len(data) < total:
            return HandshakeStep(0)
        username = _credential(data[header:header + ulen])
        password = _credential(data[header + ulen:total])
        if not self._auth_fn(username, password):
            raise self._fail("Invalid username or password", username)
        log.info('User "%s" authenticated', username)
        self.username = username
        self.state = VencryptState.AUTHENTICATED
        return HandshakeStep(total, handshake_ok_message())

    def handle_message(self, data: bytes) -> HandshakeStep:
        """Handle the message at the start of the buffered client data.

        Raises HandshakeFailed when the client is to be refused, and
        RuntimeError when no message is expected in the current state.
        """
        data = bytes(data)
        if self.state is VencryptState.WAITING_FOR_VERSION:
            return self._on_version(data)
        if self.state is VencryptState.WAITING_FOR_SUBTYPE:
            return self._on_subtype(data)
        if self.state is VencryptState.WAITING_FOR_PLAIN_AUTH:
            return self._on_plain_auth(data)
        raise RuntimeError(f"Unhandled client state: {self.state.name}")