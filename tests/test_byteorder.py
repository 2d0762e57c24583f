import struct
import sys

import pytest

from motorsim.byteorder import WordKind, host_to_network, network_to_host, swap

_SIZES = {
    WordKind.INT: (2, True),
    WordKind.UINT: (2, False),
    WordKind.WORD: (2, False),
    WordKind.DINT: (4, True),
    WordKind.UDINT: (4, False),
    WordKind.DWORD: (4, False),
    WordKind.TIME: (4, True),
    WordKind.DT: (4, False),
    WordKind.DATE: (4, False),
    WordKind.TOD: (4, False),
}


def test_swap_uint_pinned():
    assert swap(0x1234, WordKind.UINT) == 0x3412


def test_swap_udint_pinned():
    assert swap(1, WordKind.UDINT) == 0x01000000


@pytest.mark.parametrize("kind", list(_SIZES))
@pytest.mark.parametrize("value", [0, 1, 100, 0x1234, 0x7F])
def test_swap_is_an_involution(kind, value):
    assert swap(swap(value, kind), kind) == value


@pytest.mark.parametrize("kind", [WordKind.INT, WordKind.DINT, WordKind.TIME])
@pytest.mark.parametrize("value", [-1, -2, -300])
def test_swap_signed_round_trip(kind, value):
    assert swap(swap(value, kind), kind) == value


@pytest.mark.parametrize("kind", list(_SIZES))
def test_swap_reverses_bytes(kind):
    size, signed = _SIZES[kind]
    value = 0x12 if size == 2 else 0x12345678
    swapped = swap(value, kind)
    assert swapped.to_bytes(size, "little", signed=signed) == value.to_bytes(
        size, "big", signed=signed
    )


def test_swap_minus_one_is_unchanged():
    assert swap(-1, WordKind.INT) == -1
    assert swap(0xFFFFFFFF, WordKind.DWORD) == 0xFFFFFFFF


def test_swap_real_round_trip():
    assert swap(swap(1.5, WordKind.REAL), WordKind.REAL) == 1.5


def test_swap_lreal_round_trip():
    value = 0.1
    assert swap(swap(value, WordKind.LREAL), WordKind.LREAL) == value


def test_swap_real_bytes():
    swapped = swap(1.0, WordKind.REAL)
    assert struct.pack("<f", swapped) == struct.pack(">f", 1.0)


@pytest.mark.parametrize(
    "value,kind",
    [
        (0x10000, WordKind.UINT),
        (-1, WordKind.WORD),
        (40000, WordKind.INT),
        (2**32, WordKind.UDINT),
        (2**31, WordKind.DINT),
        (1e300, WordKind.REAL),
    ],
)
def test_out_of_range_raises(value, kind):
    with pytest.raises(ValueError):
        swap(value, kind)


def test_host_to_network_gives_big_endian_bytes():
    converted = host_to_network(0x1234, WordKind.UINT)
    assert converted.to_bytes(2, sys.byteorder) == (0x1234).to_bytes(2, "big")


def test_host_network_round_trip():
    value = 0x0A0B0C0D
    assert network_to_host(host_to_network(value, WordKind.UDINT), WordKind.UDINT) == value


def test_big_endian_host_leaves_value(monkeypatch):
    monkeypatch.setattr(sys, "byteorder", "big")
    assert host_to_network(0x1234, WordKind.UINT) == 0x1234
    assert network_to_host(-5, WordKind.DINT) == -5


def test_little_endian_host_swaps(monkeypatch):
    monkeypatch.setattr(sys, "byteorder", "little")
    value = 0x1234
    assert host_to_network(value, WordKind.WORD) == swap(value, WordKind.WORD)
    assert network_to_host(value, WordKind.WORD) == swap(value, WordKind.WORD)


def test_host_to_network_range_checked(monkeypatch):
    monkeypatch.setattr(sys, "byteorder", "big")
    with pytest.raises(ValueError):
        host_to_network(70000, WordKind.UINT)