# vncproto

Building blocks for writing RFB (VNC) servers in Python: the wire structures
of the protocol, the security result messages, a VeNCrypt X509-Plain state
machine, the AES ciphers, digests and Diffie-Hellman keys used by the
encrypted security types, a bandwidth estimator, tile-based damage refinement
and entropy measures for pixel data.

## Installation

```
pip install vncproto
```

For development and tests:

```
pip install -e ".[test]"
pytest
```

## Modules

- `vncproto.rfbproto`: protocol enumerations (`SecurityType`,
  `SecurityHandshakeResult`, `ClientMessageType`, `QemuMessageType`,
  `Encoding`, `ServerMessageType`, `VencryptSubtype`, `ResizeInitiator`,
  `ResizeStatus`, `RsaAesCredSubtype`, `LedState`, `ExtClipboardFlags`,
  `FenceFlags`), the constant `VERSION_MESSAGE`, and the big-endian
  structures `PixelFormat`, `Screen` and `FramebufferRect`, each with
  `pack()` and the class method `unpack()`. `unpack()` raises `ValueError`
  when given too few bytes.
- `vncproto.b64`: `encode` writes the standard alphabet with `=` padding;
  `decode` accepts both the standard and the URL-safe alphabet, ignores
  everything from the first `=` on, and raises `ValueError` on any other
  character; `is_valid` checks the characters only.
- `vncproto.bandwidth`: `BandwidthEstimator` keeps the last sixteen
  `BandwidthSample` values (bytes, departure and arrival time in
  microseconds) and gives its estimate in bytes per second through
  `estimate()`. `update_rtt_min()` takes effect on the next `feed()`.
- `vncproto.desktop_layout`: `DisplayLayout` (built from a `Screen` with
  `from_screen()`) and `DesktopLayout`, which holds at most 255 displays;
  `display_at()` returns `None` for an index out of range.
- `vncproto.cipher`: `new_cipher(enc_key, dec_key, cipher_type)` builds an
  `Aes128EcbCipher`, `AesEaxCipher` or `Aes256EaxCipher`, chosen by
  `CipherType`. `encrypt()` returns the ciphertext and the authentication
  code; `decrypt()` returns the plaintext and the code computed for it, for
  the caller to compare with the one received. The EAX ciphers use a
  128-bit little-endian message counter as nonce, one per direction. ECB
  returns an empty code and requires whole 16-byte blocks.
- `vncproto.hashing`: `Hash`, `hash_one` and `hash_many` over MD5, SHA-1 and
  SHA-256, chosen by `HashType`. `hash_many` stops at the first empty chunk;
  a `length` argument truncates the digest.
- `vncproto.dh_key`: `DhKey` over the 2048-bit MODP group of RFC 3526:
  `keygen`, `derive_public_key`, `derive_shared_secret` (which raises
  `ValueError` for keys of different groups), and `p_bytes`/`q_bytes` to
  export fixed-size big-endian values.
- `vncproto.randomness`: `random_bytes()` from the operating system's secure
  generator.
- `vncproto.auth`: `handshake_ok_message`, `handshake_failed_message` and
  `VencryptHandshake`. `handle_message()` takes the buffered client data and
  returns a `HandshakeStep` with the bytes consumed (0 while a message is
  incomplete), the reply to send, and whether to upgrade the stream to TLS
  or close it. A refused client raises `HandshakeFailed`, which carries the
  reply to send before closing.
- `vncproto.damage_refinery`: `DamageRefinery` narrows damage hints, given
  as `(x, y, width, height)` rectangles, to the 32x32 tiles whose content
  changed since it last saw them; `tile_region_from_rects` lists the tiles a
  set of rectangles touches.
- `vncproto.entropy`: `first_order_entropy` (bits per symbol and the number
  of distinct symbols) and `second_order_entropy` (bits per pair of
  neighbouring symbols).

## Example

```python
from vncproto.rfbproto import PixelFormat
from vncproto.cipher import CipherType, new_cipher
from vncproto.dh_key import keygen, derive_public_key, derive_shared_secret

fmt = PixelFormat(32, 24, False, True, 255, 255, 255, 16, 8, 0)
assert PixelFormat.unpack(fmt.pack()) == fmt

ours = keygen()
theirs = keygen()
shared = derive_shared_secret(ours, derive_public_key(theirs))
assert shared == derive_shared_secret(theirs, derive_public_key(ours))

zero_key = bytes(16)
sender = new_cipher(zero_key, zero_key, CipherType.AES_EAX)
receiver = new_cipher(zero_key, zero_key, CipherType.AES_EAX)
ciphertext, mac = sender.encrypt(b"hello", b"")
plaintext, check = receiver.decrypt(ciphertext, b"")
assert plaintext == b"hello" and check == mac
```

## What it does not do

This is a library of parts, not a server. It opens no sockets, runs no event
loop and has no TLS stream: `VencryptHandshake` only says when the caller
should switch to TLS. It has no framebuffer encoders (Raw, ZRLE, Tight,
H.264), no pixel format conversion, no cursor encoding, and no RSA-AES or
Apple DH handshake state machine; the ciphers, digests and keys those
schemes need are here, but putting them together is left to the caller.
There is no command-line program.