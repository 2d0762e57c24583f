"""Runtime constants, edge triggers and real-valued math helpers."""

from __future__ import annotations

import enum
import math
import time
from dataclasses import dataclass

__all__ = [
    "IecDataType",
    "ErrorCode",
    "RTrig",
    "FTrig",
    "RFTrig",
    "get_time",
    "real_tan",
    "real_atan",
    "real_asin",
    "real_acos",
    "real_exp",
    "real_ln",
    "real_log",
    "real_expt",
    "real_abs",
    "real_sin",
    "real_cos",
    "real_sqrt",
]


class IecDataType(enum.IntEnum):
    """Identifiers of the IEC 61131-3 elementary data types."""

    BOOL = 1
    SINT = 2
    INT = 3
    DINT = 4
    USINT = 5
    UINT = 6
    UDINT = 7
    REAL = 8
    STRING = 9
    ULINT = 10
    DATE_AND_TIME = 11
    TIME = 12
    DATE = 13
    LREAL = 14
    TIME_OF_DAY = 16
    BYTE = 17
    WORD = 18
    DWORD = 19
    LWORD = 20
    WSTRING = 21
    LINT = 23


class ErrorCode(enum.IntEnum):
    """Status codes reported by function blocks."""

    OK = 0
    NOT_IMPLEMENTED = 9999
    FUB_REDUNDANT = 35688
    FUB_ENABLE_FALSE = 65534
    FUB_BUSY = 65535
    FB_NOT_IMPLEMENTED = -1070585592


@dataclass
class RTrig:
    """Rising-edge detector: output is true for one update after CLK goes high."""

    q: bool = False
    m: bool = False

    def update(self, clk: bool) -> bool:
        clk = bool(clk)
        self.q = clk and not self.m
        self.m = clk
        return self.q


@dataclass
class FTrig:
    """Falling-edge detector: output is true for one update after CLK goes low."""

    q: bool = False
    m: bool = False

    def update(self, clk: bool) -> bool:
        clk = bool(clk)
        self.q = self.m and not clk
        self.m = clk
        return self.q


@dataclass
class RFTrig:
    """Detects either edge of CLK."""

    q: bool = False
    m: bool = False

    def update(self, clk: bool) -> bool:
        clk = bool(clk)
        self.q = clk != self.m
        self.m = clk
        return self.q


def get_time() -> int:
    """Return a monotonic system time in milliseconds."""
    return time.monotonic_ns() // 1_000_000


def real_tan(x: float) -> float:
    return math.tan(x)


def real_atan(x: float) -> float:
    return math.atan(x)


def real_asin(x: float) -> float:
    return math.asin(x)


def real_acos(x: float) -> float:
    return math.acos(x)


def real_exp(x: float) -> float:
    return math.exp(x)


def real_ln(x: float) -> float:
    """Natural logarithm."""
    return math.log(x)


def real_log(x: float) -> float:
    """Base-10 logarithm."""
    return math.log10(x)


def real_expt(x: float, y: float) -> float:
    """Raise x to the power y."""
    return math.pow(x, y)


def real_abs(x: float) -> float:
    return math.fabs(x)


def real_sin(x: float) -> float:
    return math.sin(x)


def real_cos(x: float) -> float:
    return math.cos(x)


def real_sqrt(x: float) -> float:
    return math.sqrt(x)