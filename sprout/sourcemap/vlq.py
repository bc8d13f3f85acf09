"""
sprout.sourcemap.vlq - Base64 variable-length quantities

Each integer is folded so that its sign lives in the lowest bit, then
written 5 bits at a time, least significant group first, as base64 digits.
Every digit but the last of an integer has the continuation bit (0x20) set.
"""

from typing import Iterable

BASE64_DIGITS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_DIGIT_VALUES = {c: i for i, c in enumerate(BASE64_DIGITS)}

VLQ_BASE_SHIFT = 5
VLQ_BASE = 1 << VLQ_BASE_SHIFT
VLQ_BASE_MASK = VLQ_BASE - 1
VLQ_CONTINUATION_BIT = VLQ_BASE


class VLQDecodeError(ValueError):
    """Raised on text that is not a sequence of complete VLQ values."""


def to_vlq_signed(value: int) -> int:
    if value < 0:
        return ((-value) << 1) | 1
    return value << 1


def from_vlq_signed(value: int) -> int:
    magnitude = value >> 1
    return -magnitude if value & 1 else magnitude


def encode(value: int) -> str:
    """Encode one signed integer."""
    vlq = to_vlq_signed(value)
    digits = []
    while True:
        digit = vlq & VLQ_BASE_MASK
        vlq >>= VLQ_BASE_SHIFT
        if vlq > 0:
            digit |= VLQ_CONTINUATION_BIT
        digits.append(BASE64_DIGITS[digit])
        if vlq == 0:
            return "".join(digits)


def encode_integers(values: Iterable[int]) -> str:
    """Encode signed integers back to back, without separators."""
    return "".join(encode(value) for value in values)


def decode_integers(text: str) -> list[int]:
    """
    Decode a run of VLQ values.

    Raises:
        VLQDecodeError: on a non-base64 character or a value whose last
            digit still has the continuation bit set.
    """
    values = []
    vlq = 0
    shift = 0
    continuing = False
    for char in text:
        try:
            digit = _DIGIT_VALUES[char]
        except KeyError:
            raise VLQDecodeError(f"Invalid base64 digit {char!r}") from None
        continuing = bool(digit & VLQ_CONTINUATION_BIT)
        vlq += (digit & VLQ_BASE_MASK) << shift
        if continuing:
            shift += VLQ_BASE_SHIFT
        else:
            values.append(from_vlq_signed(vlq))
            vlq = 0
            shift = 0
    if continuing:
        raise VLQDecodeError(f"Unterminated VLQ value in {text!r}")
    return values


def decode(text: str) -> int:
    """Decode exactly one signed integer."""
    values = decode_integers(text)
    if len(values) != 1:
        raise VLQDecodeError(f"Expected one VLQ value, found {len(values)}")
    return values[0]
