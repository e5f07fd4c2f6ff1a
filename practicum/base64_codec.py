"""Base64 encoding and lenient decoding of text."""

from __future__ import annotations

import base64

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"


def encode(text: str) -> str:
    """Encode the UTF-8 bytes of ``text`` as padded Base64."""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def decode(text: str) -> str:
    """Decode Base64 text.

    Characters outside the alphabet count as zero bits; every '=' removes
    one byte's worth of bits from the end; trailing bits short of a full
    byte are dropped.
    """
    bits = "".join(f"{max(_ALPHABET.find(ch), 0) if ch != '=' else 0:06b}" for ch in text)
    cut = text.count("=") * 8
    if cut <= len(bits):
        bits = bits[: len(bits) - cut]
    data = bytes(int(bits[start:start + 8], 2) for start in range(0, len(bits) - 7, 8))
    return data.decode("utf-8")