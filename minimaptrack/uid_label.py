"""The bundled bitmap of the "UID" label shown before the player's number."""

from __future__ import annotations

import numpy as np

from .bmp import decode_bmp

_UID_LABEL = bytes.fromhex(
    """
    42 4D 28 0D 00 00 00 00 00 00 36 00 00 00 28 00
    00 00 2E 00 00 00 12 00 00 00 01 00 20 00 00 00
    00 00 F2 0C 00 00 12 0B 00 00 12 0B 00 00 00 00
    00 00 00 00 00 00 80 80 80 00 7F 7F 7F 00 7D 7D
    7B 00 79 79 76 01 75 75 72 02 70 70 6D 03 6D 6D
    6A 03 6C 6C 69 03 6E 6E 6B 03 71 71 6E 02 75 75
    72 02 78 79 76 01 7C 7C 7A 00 7F 7F 7E 00 80 80
    80 00 7F 7F 7E 00 77 78 74 01 73 73 6F 03 71 71
    6E 03 6B 6C 68 04 6C 6C 69 04 72 73 6F 02 73 74
    70 03 77 77 74 01 7A 7A 78 01 72 72 6E 03 75 76
    72 03 75 75 72 04 70 70 6E 06 70 70 6E 06 70 70
    6E 06 70 71 6E 06 6D 6D 6A 04 6D 6E 6B 03 72 72
    6F 02 75 76 73 01 7A 7A 77 01 7E 7E 7D 00 80 80
    80 00 80 80 80 00 7E 7E 7D 00 7A 7A 77 01 7B 7B
    79 01 7D 7D 7C 00 7A 7A 77 01 7B 7B 79 01 7F 7F
    7F 00 79 7A 77 01 74 74 70 02 73 73 6F 03 82 82
    80 0A A8 A8 A7 3A C5 C5 C3 6F DF DF DE AA D0 D0
    CF 87 AA AA A8 3D 86 87 84 0C 77 78 75 02 73 73
    70 02 77 77 74 01 7E 7E 7D 00 80 80 80 00 7F 7F
    7D 01 F4 F4 F4 E1 FF FF FF FF FF FF FF FF FF FF
    FF FF FF FF FF FF F9 F9 F9 EC 80 80 7E 01 7C 7C
    7A 00 78 79 75 03 FD FD FD F9 FF FF FF FF FF FF
    FF FF FF FF FF FF FF FF FF FF FF FF FF FF FF FF
    FF FF E1 E1 E0 AF 9F A0 9E 2E 7B 7C 79 05 73 73
    6F 02 75 76 72 02 7C 7D 7A 00 7F 7F 7F 00 79 7A
    77 01 73 73 6F 03 84 84 81 09 8D 8D 8B 10 7A 7A
    77 04 73 73 6F 02 7C 7C 7A 00 73 73 6F 02 79 79
    77 03 CB CB CA 7C FF FF FF FF FF FF FF FF FF FF
    FF FF FF FF FF FF FF FF FF FF FF FF FF FF FF FF
    FF FF EA EA E9 C5 84 84 82 06 72 73 6E 03 78 78
    75 01 7E 7E 7D 00 7A 7B 79 01 80 81 7E 06 FF FF
    FF FF FF FF FF FF FF FF FF FF FF FF FF FF 84 84
    82 09 7A 7A 78 00 7A 7A 78 00 7A 7A 77 04 FF FF
    FF FF FF FF FF FF FF FF FF FF FF FF FF FF FF FF
    FF FF FF FF FF FF FF FF FF FF FF FF FF FF FF FF
    FF FF FF FF FF FF 96 96 94 1D 74 74 70 02 75 75
    71 02 7D 7D 7B 00 7B 7B 79 00 85 86 82 0A FF FF
    FF FF FF FF FF FF DD DE DC A6 77 77 73 02 76 77
    74 01 75 75 72 02 DB DB DA A0 FF FF FF FF FF FF
    FF FF FF FF FF FF AB AB AA 41 84 84 82 0C 82 82
    80 0A 91 91 8F 18 EF EF EE D2 FF FF FF FF FF FF
    FF FF 83 83 80 07 73 73 70 02 7B 7C 7A 00 74 75
    71 02 68 68 65 04 E9 EA E9 C5 FF FF FF FF FF FF
    FF FF FD FD FD F9 6A 6A 67 05 74 74 72 01 76 76
    74 01 76 76 73 07 FF FF FF FF FF FF FF FF FF FF
    FF FF AE AE AD 48 87 87 86 14 90 90 8F 1B B6 B6
    B5 53 FF FF FF FF FF FF FF FF FF FF FF FF FF FF
    FF FF A1 A1 9F 2D 73 73 6F 02 78 78 75 01 7C 7C
    7A 00 90 90 8D 13 FF FF FF FF FF FF FF FF FF FF
    FF FF 7B 7B 79 01 73 74 70 02 8F 8F 8D 17 FF FF
    FF FF FF FF FF FF FF FF FF FF 94 94 93 1F 6C 6C
    69 03 6F 6F 6C 03 6E 6F 6C 03 6C 6D 6A 03 77 78
    76 05 F3 F3 F3 DE FF FF FF FF DA DA D9 9D 71 72
    6E 02 7C 7C 7A 00 79 7A 77 01 68 69 65 04 DE DF
    DE AB FF FF FF FF FF FF FF FF FB FB FB F2 67 67
    64 05 79 79 77 01 77 78 75 01 76 76 74 07 FF FF
    FF FF FF FF FF FF FF FF FF FF 88 88 87 13 68 69
    66 04 6C 6C 69 03 6C 6C 69 04 78 78 76 07 D7 D7
    D6 98 FF FF FF FF FF FF FF FF FF FF FF FF 84 84
    82 0A 74 74 71 02 76 76 73 01 79 79 76 03 CE CE
    CC 81 F9 F9 F9 EC 92 92 8F 17 73 74 6F 02 6F 70
    6D 03 D1 D1 D0 8B FF FF FF FF FF FF FF FF F5 F5
    F4 E2 6F 6F 6D 04 73 74 71 02 7C 7C 7A 00 7D 7D
    7C 00 77 77 74 01 6C 6C 69 03 9A 9A 99 26 FF FF
    FF FF FF FF FF FF 75 76 73 05 7A 7B 79 01 7B 7B
    79 00 69 69 66 04 DF DF DE AB FF FF FF FF FF FF
    FF FF FB FB FB F2 67 68 64 05 7A 7B 79 00 78 78
    75 01 76 76 74 07 FF FF FF FF FF FF FF FF FF FF
    FF FF 88 88 87 12 72 72 6F 02 7B 7B 79 00 77 78
    75 01 71 71 6E 03 76 76 74 06 F7 F7 F7 E9 FF FF
    FF FF FF FF FF FF D8 D8 D7 9A 72 72 6F 02 76 76
    73 01 73 73 6F 02 75 76 72 02 7A 7A 78 01 74 74
    70 02 76 76 72 02 6B 6B 68 04 F5 F5 F5 E5 FF FF
    FF FF FF FF FF FF C0 C0 BE 65 69 6A 67 04 79 79
    77 01 80 80 7F 00 80 80 80 00 7D 7E 7C 00 6F 70
    6D 03 81 81 80 0D FF FF FF FF FF FF FF FF 78 78
    76 08 79 79 77 01 7B 7B 79 00 69 6A 66 04 DF DF
    DE AB FF FF FF FF FF FF FF FF FB FB FB F2 67 68
    64 05 7A 7B 79 01 78 78 75 01 76 76 74 07 FF FF
    FF FF FF FF FF FF FF FF FF FF 89 89 87 13 73 73
    70 02 7F 7F 7E 00 7F 7F 7E 00 79 79 76 01 6D 6E
    6A 03 A0 A0 9F 31 FF FF FF FF FF FF FF FF FF FF
    FF FF 7B 7B 79 07 78 78 76 01 7D 7D 7B 00 7F 7F
    7E 00 7F 7F 7F 00 7E 7E 7C 00 7F 7F 7E 00 68 68
    65 04 FF FF FF FF FF FF FF FF FF FF FF FF AF AF
    AD 48 6B 6C 68 04 7C 7C 7B 00 80 80 80 00 80 80
    80 00 7F 7F 7E 00 73 74 71 02 80 80 7E 0C FF FF
    FF FF FF FF FF FF 78 78 75 08 77 78 75 01 7B 7B
    79 00 69 6A 66 04 DF DF DE AB FF FF FF FF FF FF
    FF FF FB FB FB F2 67 68 64 05 7B 7B 79 01 78 78
    75 01 76 76 74 07 FF FF FF FF FF FF FF FF FF FF
    FF FF 89 89 87 13 73 73 70 02 7F 7F 7E 00 80 80
    80 00 7E 7E 7C 00 71 71 6D 03 81 81 7F 0D FF FF
    FF FF FF FF FF FF FF FF FF FF 88 89 87 12 76 76
    73 01 7D 7D 7C 00 7F 7F 7E 00 7F 7F 7F 00 7E 7E
    7D 00 7F 7F 7E 00 67 67 64 05 FF FF FF FF FF FF
    FF FF FF FF FF FF AE AE AC 45 6D 6E 6A 03 7D 7D
    7C 00 80 80 80 00 80 80 80 00 7F 7F 7F 00 75 75
    72 01 80 80 7E 0C FF FF FF FF FF FF FF FF 78 78
    75 08 77 77 75 01 7B 7B 79 00 69 6A 66 04 DF DF
    DE AB FF FF FF FF FF FF FF FF FB FB FB F2 67 68
    64 05 7B 7B 79 01 78 78 75 01 76 76 73 07 FF FF
    FF FF FF FF FF FF FF FF FF FF 89 89 87 13 73 73
    70 02 7F 7F 7E 00 80 80 80 00 7F 7F 7F 00 75 75
    72 02 78 78 75 08 FF FF FF FF FF FF FF FF FF FF
    FF FF 94 94 92 1F 70 71 6E 02 73 73 70 02 77 77
    73 01 7B 7B 78 01 75 75 71 02 77 78 74 01 66 67
    64 05 FF FF FF FF FF FF FF FF FF FF FF FF AE AE
    AC 45 6D 6E 6B 03 7D 7D 7C 00 80 80 80 00 80 80
    80 00 7F 7F 7F 00 75 75 72 01 80 80 7E 0C FF FF
    FF FF FF FF FF FF 78 78 75 08 77 77 74 01 7B 7B
    79 00 69 69 66 04 DF DF DE AB FF FF FF FF FF FF
    FF FF FB FB FB F2 67 68 64 05 7A 7B 79 00 78 78
    75 01 76 76 73 07 FF FF FF FF FF FF FF FF FF FF
    FF FF 89 89 87 13 73 73 70 02 7F 7F 7E 00 80 80
    80 00 80 80 7F 00 76 76 73 01 75 75 73 07 FF FF
    FF FF FF FF FF FF FF FF FF FF 98 98 96 24 6D 6E
    6B 03 76 76 73 03 B5 B5 B2 4D D7 D7 D5 94 89 89
    86 0E 73 73 6F 03 67 67 64 05 FF FF FF FF FF FF
    FF FF FF FF FF FF AE AE AC 45 6D 6E 6B 03 7D 7D
    7C 00 80 80 80 00 80 80 80 00 7F 7F 7F 00 75 75
    72 01 80 80 7E 0C FF FF FF FF FF FF FF FF 78 78
    75 08 77 77 74 01 7B 7B 79 00 69 69 66 04 DF DF
    DE AB FF FF FF FF FF FF FF FF FB FB FB F2 67 68
    64 05 7B 7B 79 00 78 78 75 01 76 76 73 07 FF FF
    FF FF FF FF FF FF FF FF FF FF 89 89 87 14 73 73
    70 02 7F 7F 7E 00 80 80 80 00 7F 7F 7F 00 75 75
    72 02 7A 7A 78 09 FF FF FF FF FF FF FF FF FF FF
    FF FF 93 93 91 1D 72 72 70 02 8E 8E 8C 11 FF FF
    FF FF FF FF FF FF FD FD FD FA 7B 7B 79 01 66 67
    64 05 FF FF FF FF FF FF FF FF FF FF FF FF AE AE
    AC 45 6E 6E 6B 03 7D 7D 7C 00 80 80 80 00 80 80
    80 00 7F 7F 7F 00 75 75 72 01 80 80 7E 0C FF FF
    FF FF FF FF FF FF 78 78 75 08 77 77 75 01 7B 7B
    79 00 69 69 66 04 DF DF DE AB FF FF FF FF FF FF
    FF FF FB FB FB F2 67 68 64 05 7A 7B 79 00 78 78
    75 01 76 76 73 07 FF FF FF FF FF FF FF FF FF FF
    FF FF 89 89 87 13 73 73 70 02 7F 7F 7E 00 80 80
    80 00 7E 7E 7C 00 72 72 6F 02 82 82 80 0E FF FF
    FF FF FF FF FF FF FF FF FF FF 86 86 85 0F 72 72
    70 02 87 87 85 0C FF FF FF FF FF FF FF FF E8 E8
    E7 C1 78 77 74 01 67 67 64 05 FF FF FF FF FF FF
    FF FF FF FF FF FF AE AE AC 45 6D 6E 6B 03 7D 7D
    7C 00 80 80 80 00 80 80 80 00 7F 7F 7F 00 75 75
    72 01 80 80 7E 0C FF FF FF FF FF FF FF FF 78 78
    75 08 77 77 75 01 7B 7B 79 00 69 69 66 04 DF DF
    DE AB FF FF FF FF FF FF FF FF FB FB FB F2 67 67
    64 05 7A 7B 79 00 78 78 75 01 76 76 73 07 FF FF
    FF FF FF FF FF FF FF FF FF FF 89 89 87 13 73 73
    70 02 7F 7F 7E 00 7F 7F 7E 00 79 79 76 01 6F 6F
    6C 03 A7 A7 A6 3B FF FF FF FF FF FF FF FF FF FF
    FF FF 78 78 76 05 72 72 6F 02 72 73 6F 03 8C 8C
    89 10 9A 9A 97 20 7D 7D 7A 05 73 73 6F 02 67 67
    64 05 FF FF FF FF FF FF FF FF FF FF FF FF AE AE
    AC 45 6C 6D 6A 03 7D 7D 7B 00 80 80 80 00 80 80
    80 00 7F 7F 7F 00 75 75 72 01 80 80 7E 0C FF FF
    FF FF FF FF FF FF 78 78 75 08 76 77 74 01 7A 7B
    79 00 69 69 66 04 DF DF DE AB FF FF FF FF FF FF
    FF FF FB FB FB F2 67 67 64 05 7A 7A 79 00 77 78
    75 01 76 76 73 07 FF FF FF FF FF FF FF FF FF FF
    FF FF 88 88 87 12 72 72 6F 02 7B 7B 79 01 78 78
    75 01 72 72 6F 02 77 77 75 06 F5 F5 F5 E4 FF FF
    FF FF FF FF FF FF BB BB BA 5C 70 70 6D 03 78 79
    76 01 78 78 75 01 7A 7A 77 01 7D 7D 7B 00 79 79
    76 01 7B 7B 78 01 67 67 64 05 FF FF FF FF FF FF
    FF FF FF FF FF FF B1 B1 AF 4A 6B 6B 68 03 7B 7B
    79 00 80 80 80 00 80 80 80 00 7F 7F 7E 00 73 73
    70 02 80 80 7E 0C FF FF FF FF FF FF FF FF 79 79
    77 08 74 74 72 01 78 78 76 01 68 69 66 04 DE DF
    DE AB FF FF FF FF FF FF FF FF FB FB FB F2 68 68
    65 05 78 78 76 01 74 74 72 01 76 76 73 07 FF FF
    FF FF FF FF FF FF FF FF FF FF 88 88 87 13 6A 6A
    67 04 6C 6C 69 03 6C 6C 69 04 79 79 78 06 D6 D6
    D5 96 FF FF FF FF FF FF FF FF FC FC FC F6 7C 7C
    79 05 74 74 70 02 7D 7D 7C 00 7F 7F 7F 00 80 80
    7F 00 80 80 80 00 7F 7F 7F 00 80 80 7F 00 70 70
    6D 05 FF FF FF FF FF FF FF FF FF FF FF FF D3 D3
    D2 8E 6E 6E 6B 03 79 7A 77 01 7F 7F 7F 00 80 80
    80 00 7D 7D 7B 00 73 73 70 02 85 85 83 0F FF FF
    FF FF FF FF FF FF 81 81 80 0B 74 74 72 01 74 74
    72 01 6E 6E 6B 04 F5 F5 F4 E2 FF FF FF FF FF FF
    FF FF FF FF FF FF 71 71 6F 04 75 75 73 01 73 73
    71 02 7C 7D 7B 08 FF FF FF FF FF FF FF FF FF FF
    FF FF B0 B1 AF 4A 8F 8F 8D 17 94 94 92 1B B1 B1
    AF 47 FF FF FF FF FF FF FF FF FF FF FF FF FF FF
    FF FF 87 87 84 0C 72 72 6E 03 79 79 76 01 7F 7F
    7F 00 80 80 80 00 80 80 80 00 80 80 80 00 80 80
    80 00 80 80 80 00 8B 8C 89 11 FF FF FF FF FF FF
    FF FF FF FF FF FF FF FF FF FF 80 80 7E 06 7D 7D
    7C 00 80 80 7F 00 80 80 80 00 7F 7F 7E 00 7A 7A
    78 01 C0 C0 BE 64 FF FF FF FF FF FF FF FF B6 B6
    B4 51 7A 7A 78 01 7B 7B 79 00 96 96 93 1D FF FF
    FF FF FF FF FF FF FF FF FF FF FF FF FF FF 9E 9E
    9B 28 7B 7B 7A 00 7B 7B 79 01 C0 C0 BD 62 FF FF
    FF FF FF FF FF FF FF FF FF FF FF FF FF FF FF FF
    FF FF FF FF FF FF FF FF FF FF FF FF FF FF FF FF
    FF FF CE CE CD 82 7F 7F 7D 05 73 73 6F 02 77 77
    73 02 7E 7E 7D 00 80 80 80 00 80 80 80 00 80 80
    80 00 80 80 80 00 80 80 80 00 80 80 80 00 A4 A4
    A1 31 A4 A5 A2 31 A4 A4 A2 33 A3 A3 A1 31 A4 A4
    A2 31 A3 A3 A0 2E 7F 7F 7D 01 80 80 80 00 80 80
    80 00 7F 7F 7E 00 89 89 86 0B A5 A5 A2 32 A3 A3
    A0 2C A2 A2 A0 2C A5 A5 A2 32 8F 8F 8C 10 7E 7E
    7C 01 A9 A9 A6 38 AA AA A8 3A AA AA A8 3D A9 A9
    A7 3B AA AA A7 39 AA AA A8 3B 7F 7F 7D 02 83 83
    80 05 A0 A0 9D 29 9F 9F 9C 2A 9F 9F 9D 2C 9F 9F
    9D 2C 9F 9F 9D 2B 9F 9F 9D 2B 9E 9F 9D 2B 98 98
    96 23 8A 8A 88 12 7C 7C 79 06 72 72 6F 02 74 74
    70 02 78 78 75 01 7E 7E 7D 00 80 80 80 00 80 80
    80 00 80 80 80 00 80 80 80 00 80 80 80 00 80 80
    80 00 80 80 80 00 00 00
    """
)


def uid_label_bmp() -> bytes:
    """Raw bitmap file of the "UID" label."""
    return _UID_LABEL


def uid_label_image() -> np.ndarray:
    """Decoded RGBA image of the "UID" label, top row first."""
    return decode_bmp(_UID_LABEL)