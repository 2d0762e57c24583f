"""DC motor and limited PI regulator simulation with runtime, byte-order and time helpers."""

__version__ = "0.1.0"
__all__ = ["astime", "blocks", "byteorder", "program", "runtime"]