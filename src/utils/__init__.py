"""Utility helpers shared across codec components."""

from src.utils.bits_bytes_utils import (
    bits_to_bytes,
    bytes_to_bits,
    pack_with_padding,
    read_byte,
    unpack_with_padding,
)
from src.utils.file_utils import read_all_bytes, write_all_bytes

__all__ = [
    "bits_to_bytes",
    "bytes_to_bits",
    "pack_with_padding",
    "read_byte",
    "unpack_with_padding",
    "read_all_bytes",
    "write_all_bytes",
]
