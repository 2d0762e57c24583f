"""Byte-order conversion of IEC elementary values between host and network order."""

from __future__ import annotations

import enum
import struct
import sys

__all__ = ["WordKind", "swap", "host_to_network", "network_to_host"]


class WordKind(enum.Enum):
    """Elementary types whose byte order can be converted."""

    INT = "int"
    UINT = "uint"
    WORD = "word"
    DINT = "dint"
    UDINT = "udint"
    DWORD = "dword"
    TIME = "time"
    DT = "dt"
    DATE = "date"
    TOD = "tod"
    REAL = "real"
    LREAL = "lreal"


_FORMATS = {
    WordKind.INT: "h",
    WordKind.UINT: "H",
    WordKind.WORD: "H",
    WordKind.DINT: "i",
    WordKind.UDINT: "I",
    WordKind.DWORD: "I",
    WordKind.TIME: "i",
    WordKind.DT: "I",
    WordKind.DATE: "I",
    WordKind.TOD: "I",
    WordKind.REAL: "f",
    WordKind.LREAL: "d",
}


def _convert(value, kind: WordKind, reverse: bool):
    fmt = _FORMATS[WordKind(kind)]
    try:
        packed = struct.pack("<" + fmt, value)
    except (struct.error, OverflowError) as exc:
        raise ValueError(f"{value!r} does not fit in {WordKind(kind).name}") from exc
    return struct.unpack((">" if reverse else "<") + fmt, packed)[0]


def swap(value, kind):
    """Return ``value`` with the order of its bytes reversed.

    REAL values are rounded to single precision first. Raises
    ValueError when the value does not fit in the given kind.
    """
    return _convert(value, kind, reverse=True)


def host_to_network(value, kind):
    """Convert a value from host byte order to network (big-endian) order."""
    return _convert(value, kind, reverse=sys.byteorder != "big")


def network_to_host(value, kind):
    """Convert a value from network (big-endian) byte order to host order."""
    return _convert(value, kind, reverse=sys.byteorder != "big")