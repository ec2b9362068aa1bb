"""Bundled resource identifiers and the UID digit bitmaps."""

from __future__ import annotations

import enum

import numpy as np

from .bmp import decode_bmp


class ResourceId(enum.IntEnum):
    """Identifiers of the images bundled with the tracker."""

    STAR = 101
    PAIMON = 102
    UID0 = 110
    UID1 = 111
    UID2 = 112
    UID3 = 113
    UID4 = 114
    UID5 = 115
    UID6 = 116
    UID7 = 117
    UID8 = 118
    UID9 = 119
    UID_LABEL = 120
    MINIMAP_CAILB = 131
    GIMAP = 132

    @classmethod
    def uid_digit(cls, digit: int) -> "ResourceId":
        """Identifier of the bitmap for one UID digit."""
        if not 0 <= digit <= 9:
            raise ValueError(f"not a decimal digit: {digit}")
        return cls(cls.UID0 + digit)


_UID4 = bytes.fromhex(
    """
    42 4D 70 04 00 00 00 00 00 00 36 00 00 00 28 00
    00 00 0F 00 00 00 12 00 00 00 01 00 20 00 00 00
    00 00 3A 04 00 00 12 0B 00 00 12 0B 00 00 00 00
    00 00 00 00 00 00 7F 80 80 00 80 80 80 00 80 80
    80 00 80 80 80 00 80 80 80 00 80 80 80 00 78 7B
    7D 00 6A 71 75 02 79 7C 7F 03 77 7A 7C 00 6A 70
    74 02 70 75 78 01 7D 7E 7F 00 80 80 80 00 80 80
    80 00 7C 7E 7F 00 80 80 80 00 80 80 80 00 80 80
    80 00 80 80 80 00 80 80 80 00 79 7B 7D 00 6F 74
    77 03 FF FF FF FF DF E1 E1 AE 7B 7F 81 06 69 6F
    73 02 77 7A 7C 00 80 80 80 00 80 80 80 00 7A 7D
    7E 00 80 80 80 00 80 80 80 00 80 80 80 00 80 80
    80 00 80 80 80 00 77 7A 7C 00 6F 73 75 03 FF FF
    FF FF FF FF FF FF F5 F5 F6 E5 72 76 78 03 75 78
    7B 01 7F 7F 80 00 80 80 80 00 76 79 7B 00 79 7C
    7E 00 77 7A 7C 00 74 78 7A 01 74 78 7B 01 74 78
    7A 01 6E 71 73 01 68 6B 6D 05 FF FF FF FF FF FF
    FF FF FF FF FF FF 7D 7F 81 09 6F 72 74 01 77 7A
    7C 00 79 7C 7D 00 66 6C 6F 03 6A 71 74 03 68 6E
    71 03 63 68 6B 05 63 68 6B 05 63 68 6B 04 66 69
    6B 04 68 6A 6B 07 FF FF FF FF FF FF FF FF FF FF
    FF FF 83 84 85 13 67 69 6C 04 6E 72 75 02 6A 6F
    73 02 75 78 7B 04 FD FD FD F9 FF FF FF FF FF FF
    FF FF FF FF FF FF FF FF FF FF FF FF FF FF FF FF
    FF FF FF FF FF FF FF FF FF FF FF FF FF FF FF FF
    FF FF FF FF FF FF FF FF FF FF A0 A5 A8 30 74 77
    79 02 F9 F9 F9 ED FF FF FF FF FF FF FF FF FF FF
    FF FF FF FF FF FF FF FF FF FF FF FF FF FF FF FF
    FF FF FF FF FF FF FF FF FF FF FF FF FF FF FF FF
    FF FF FF FF FF FF A3 A8 AB 35 66 6B 6D 03 8A 8E
    90 18 FF FF FF FF D4 D5 D6 95 8A 8C 8D 1A 8A 8C
    8D 1A 8A 8C 8D 18 8F 91 92 20 FF FF FF FF FF FF
    FF FF FF FF FF FF A9 A9 AA 42 89 8B 8D 16 87 8A
    8D 11 7B 7F 82 07 6A 6F 71 02 6A 70 73 02 C6 C9
    C9 78 FD FD FD F9 75 78 7A 05 65 69 6B 03 65 68
    6B 03 66 69 6B 06 FF FF FF FF FF FF FF FF FF FF
    FF FF 81 82 83 0F 67 6A 6D 03 71 75 77 01 73 77
    7A 01 71 75 77 01 6A 71 75 02 78 7B 7E 03 FB FB
    FC F5 BE C1 C3 67 72 75 78 01 6B 6F 71 02 68 6B
    6E 05 FF FF FF FF FF FF FF FF FF FF FF FF 80 82
    84 0E 6D 71 73 02 7B 7D 7E 00 7E 7F 7F 00 76 79
    7B 00 71 76 7A 01 70 75 78 01 8D 92 95 17 FF FF
    FF FF 81 85 88 09 6E 72 74 01 68 6B 6D 06 FF FF
    FF FF FF FF FF FF FF FF FF FF 80 83 85 0F 6D 72
    75 02 7E 7F 7F 00 80 80 80 00 76 7A 7C 00 7A 7D
    7E 00 6E 74 78 01 75 79 7B 01 D0 D2 D4 8C EB EC
    EC CC 73 76 78 02 68 6B 6C 06 FF FF FF FF FF FF
    FF FF FF FF FF FF 80 83 85 0F 6D 72 75 02 7E 7F
    80 00 80 80 80 00 76 7A 7C 00 7F 80 80 00 76 7A
    7C 00 6F 75 78 01 7A 7E 80 02 FF FF FF FF A1 A3
    A4 33 69 6C 6D 06 FF FF FF FF FF FF FF FF FF FF
    FF FF 7F 83 85 0F 6D 72 75 02 7E 7F 7F 00 7F 80
    80 00 77 7A 7B 00 80 80 80 00 7D 7F 7F 00 71 77
    7A 01 72 77 7A 01 94 99 9B 20 FF FF FF FF 80 82
    84 10 FF FF FF FF FF FF FF FF FF FF FF FF 7F 82
    85 0F 6D 72 75 01 7D 7E 7F 00 77 7B 7D 00 77 7A
    7B 00 80 80 80 00 80 80 80 00 79 7C 7E 00 6F 75
    78 01 76 7A 7C 01 DB DD DE A6 E4 E5 E5 BB FF FF
    FF FF FF FF FF FF FF FF FF FF 7F 82 85 0F 6D 72
    75 01 7D 7E 7F 00 72 77 7B 01 78 7A 7C 00 80 80
    80 00 80 80 80 00 7F 80 80 00 75 79 7C 00 6F 75
    78 01 7A 7F 81 06 FF FF FF FF FF FF FF FF FF FF
    FF FF FF FF FF FF 7F 83 85 0D 6F 74 77 01 7D 7F
    7F 00 79 7C 7D 00 7A 7C 7D 00 80 80 80 00 80 80
    80 00 80 80 80 00 7D 7E 7F 00 70 76 79 01 68 70
    73 02 9F A3 A5 33 FF FF FF FF FF FF FF FF FF FF
    FF FF 7E 83 85 0A 73 77 7A 01 7D 7F 7F 00 77 7B
    7D 00 7B 7D 7E 00 80 80 80 00 80 80 80 00 80 80
    80 00 80 80 80 00 7A 7C 7E 00 6B 72 76 02 6E 74
    78 03 9D A1 A3 30 A4 A8 AA 3A A2 A7 AA 37 75 7B
    7F 05 73 78 7B 01 7D 7F 7F 00 72 77 7B 01 00 00
    """
)

_UID7 = bytes.fromhex(
    """
    42 4D E0 03 00 00 00 00 00 00 36 00 00 00 28 00
    00 00 0D 00 00 00 12 00 00 00 01 00 20 00 00 00
    00 00 AA 03 00 00 12 0B 00 00 12 0B 00 00 00 00
    00 00 00 00 00 00 80 80 80 00 7F 7F 80 00 74 78
    7A 01 6D 72 76 02 73 77 7A 01 74 77 7A 01 6A 70
    74 02 72 76 79 01 7D 7E 7F 00 80 80 80 00 80 80
    80 00 80 80 80 00 80 80 80 00 80 80 80 00 7F 80
    80 00 75 79 7B 00 81 85 88 0C FF FF FF FF C9 CB
    CE 7D 78 7C 7F 05 69 6F 74 02 78 7B 7D 00 80 80
    80 00 80 80 80 00 80 80 80 00 80 80 80 00 80 80
    80 00 7F 80 80 00 76 79 7B 00 7D 81 83 08 FF FF
    FF FF FF FF FF FF E6 E7 E8 C0 6E 73 75 02 74 78
    7B 01 7F 7F 80 00 80 80 80 00 80 80 80 00 7D 7E
    7F 00 7B 7D 7E 00 7E 7F 7F 00 70 74 77 01 76 79
    7B 08 FF FF FF FF FF FF FF FF FF FF FF FF 7A 7C
    7F 08 70 74 77 01 7D 7E 7F 00 80 80 80 00 80 80
    80 00 79 7B 7D 00 6F 74 77 01 7D 7E 7F 00 73 77
    79 01 6C 70 72 05 FF FF FF FF FF FF FF FF FF FF
    FF FF 8D 90 92 1C 6B 6F 72 02 7C 7D 7E 00 80 80
    80 00 7F 80 80 00 76 79 7B 00 76 79 7C 00 7E 7F
    7F 00 76 79 7B 00 64 69 6C 03 E2 E3 E4 B7 FF FF
    FF FF FF FF FF FF B0 B1 B3 4E 67 6B 6E 02 79 7B
    7D 00 80 80 80 00 7E 7F 7F 00 72 76 78 01 7A 7C
    7E 00 7F 80 80 00 7A 7C 7D 00 66 6B 6F 03 A4 A6
    A8 3B FF FF FF FF FF FF FF FF EA EB EB CA 65 69
    6C 03 75 78 7A 01 7F 7F 80 00 7E 7E 7F 00 6F 72
    75 01 6F 73 77 01 7D 7E 7F 00 7C 7D 7E 00 6B 70
    73 02 80 83 84 0E FF FF FF FF FF FF FF FF FF FF
    FF FF 70 74 76 06 6F 73 76 01 7D 7E 7F 00 7D 7E
    7F 00 6C 70 73 02 76 79 7C 00 7E 7F 7F 00 7E 7F
    7F 00 71 75 78 01 6C 70 72 04 F9 F9 F9 EF FF FF
    FF FF FF FF FF FF 87 8A 8B 15 6B 6F 72 02 7A 7C
    7D 00 7D 7E 7E 00 6A 6E 71 02 7F 7F 80 00 80 80
    80 00 80 80 80 00 77 7A 7C 00 68 6D 70 02 9D 9F
    A1 30 FF FF FF FF FF FF FF FF C0 C1 C2 6A 68 6C
    6F 02 76 79 7B 00 7B 7D 7E 00 69 6E 71 02 80 80
    80 00 80 80 80 00 80 80 80 00 7B 7D 7E 00 6D 71
    75 02 73 76 79 05 FD FD FD F9 FF FF FF FF FF FF
    FF FF 70 73 76 04 6F 73 76 01 7A 7C 7D 00 6A 6E
    72 02 80 80 80 00 80 80 80 00 80 80 80 00 7F 7F
    80 00 74 78 7A 01 68 6D 71 02 99 9B 9D 28 FF FF
    FF FF FF FF FF FF 8C 8E 90 18 6A 6F 72 02 76 79
    7B 00 6C 70 73 02 80 80 80 00 80 80 80 00 7F 80
    80 00 80 80 80 00 7B 7D 7E 00 6D 72 75 02 6E 72
    74 03 DC DD DE A6 FF FF FF FF E8 E9 EA C3 6F 72
    75 02 70 74 76 01 6E 72 74 01 78 7B 7D 00 78 7A
    7C 00 74 77 79 01 74 77 79 01 75 78 7A 01 6F 72
    75 01 65 68 6B 03 78 7A 7C 07 FB FB FB F2 FF FF
    FF FF 86 89 8A 10 6C 70 73 01 6F 72 75 01 83 89
    8C 0F 74 79 7C 04 6A 6E 71 04 67 6A 6D 05 67 6A
    6D 05 69 6C 6E 04 67 69 6B 05 64 66 67 06 87 88
    89 13 FF FF FF FF E1 E1 E2 B1 6F 72 74 02 6C 70
    72 02 8E 94 98 1A FF FF FF FF FF FF FF FF FF FF
    FF FF FF FF FF FF FF FF FF FF FF FF FF FF FF FF
    FF FF FF FF FF FF FF FF FF FF FF FF FF FF 98 9A
    9C 25 70 73 75 01 7D 82 85 05 FF FF FF FF FF FF
    FF FF FF FF FF FF FF FF FF FF FF FF FF FF FF FF
    FF FF FF FF FF FF FF FF FF FF FF FF FF FF FF FF
    FF FF FF FF FF FF 7B 7D 7F 02 6F 76 7A 03 97 9C
    9F 27 9A 9E A0 2C 9C 9F A0 2F 9C 9F A0 2F 9C 9E
    A0 2F 9C 9E A0 2F 9C 9E A0 2F 9C 9E A0 2F 9B 9E
    A0 2D 99 9C 9F 28 99 9D 9F 28 7F 83 86 09 00 00
    """
)

_UID_DIGITS = {
    ResourceId.UID4: _UID4,
    ResourceId.UID7: _UID7,
}


def bundled_uid_digits() -> tuple:
    """Digits whose bitmaps are bundled, in ascending order."""
    return tuple(sorted(rid - ResourceId.UID0 for rid in _UID_DIGITS))


def uid_digit_bmp(digit: int) -> bytes:
    """Raw bitmap file of one UID digit.

    Raises ValueError for a non-digit and LookupError for a digit not bundled.
    """
    rid = ResourceId.uid_digit(digit)
    try:
        return _UID_DIGITS[rid]
    except KeyError:
        raise LookupError(f"no bitmap bundled for UID digit {digit}") from None


def uid_digit_image(digit: int) -> np.ndarray:
    """Decoded RGBA image of one UID digit."""
    return decode_bmp(uid_digit_bmp(digit))