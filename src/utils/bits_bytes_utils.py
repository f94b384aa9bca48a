from typing import List, Sequence

BITS_IN_BYTE = 8


def read_byte(bits: Sequence[int], pos: int = 0) -> int:
    """Read 8 bits starting at `pos` (least-significant bit first)."""
    if pos + BITS_IN_BYTE > len(bits):
        raise ValueError(
            f"Need {BITS_IN_BYTE} bits at position {pos}, got {len(bits) - pos}"
        )
    value = 0
    for offset in range(BITS_IN_BYTE):
        if bits[pos + offset]:
            value |= 1 << offset
    return value


def bits_to_bytes(bits: Sequence[int]) -> bytes:
    """
    Convert bits -> bytes, LSB-first inside each byte.

    Length must be a multiple of 8.
    """
    if len(bits) % BITS_IN_BYTE != 0:
        raise ValueError(
            f"Bit sequence length must be multiple of 8, got {len(bits)}"
        )
    return bytes(read_byte(bits, i) for i in range(0, len(bits), BITS_IN_BYTE))


def bytes_to_bits(data: bytes) -> List[int]:
    """Convert bytes -> bits (8 bits per byte, LSB-first)."""
    return [(byte >> pos) & 1 for byte in data for pos in range(BITS_IN_BYTE)]


def pack_with_padding(bits: Sequence[int]) -> bytes:
    """
    Pack an arbitrary-length bit sequence into bytes.

    Between 1 and 8 zero bits are put in front of the sequence so that it
    becomes byte-aligned; the number of inserted bits is stored as the
    first byte of the result.
    """
    padding = BITS_IN_BYTE - len(bits) % BITS_IN_BYTE
    padded = [0] * padding
    padded.extend(bits)
    return bytes([padding]) + bits_to_bytes(padded)


def unpack_with_padding(data: bytes) -> List[int]:
    """
    Reverse of `pack_with_padding`.
    """
    if not data:
        raise ValueError("Cannot unpack an empty buffer: padding byte missing")
    padding = data[0]
    bits = bytes_to_bits(data[1:])
    if not 1 <= padding <= BITS_IN_BYTE or padding > len(bits):
        raise ValueError(
            f"Invalid padding count {padding} for {len(bits)} packed bits"
        )
    return bits[padding:]
