"""
Huffman codec: bytes -> self-describing packed stream -> bytes.

Stream layout: one byte holding the padding count, then the packed bits of
`padding zeros ++ tree topology ++ payload`.
"""

import os
import sys
from dataclasses import dataclass

from src.huffman.decoding_tree import HuffmanDecodingTree
from src.huffman.encoding_tree import HuffmanEncodingTree
from src.utils.bits_bytes_utils import BITS_IN_BYTE, pack_with_padding, unpack_with_padding

# Debug logging controlled by environment variable HUFFMAN_DEBUG
_DEBUG = os.environ.get("HUFFMAN_DEBUG", "").lower() in {"1", "true", "yes"}


def _dbg(msg: str) -> None:
    if _DEBUG:
        print(f"[HUFF] {msg}", file=sys.stderr)


@dataclass
class CodecResult:
    """
    Output of one encode or decode run.

    - data: produced bytes (packed stream or restored original)
    - initial_size: size of the input the run consumed, in bytes
      (for decode: the payload part of the stream)
    - processed_size: size of the useful output, in bytes
      (for encode: the payload part of the stream)
    - aux_size: bytes spent on the header and tree topology
    """
    data: bytes
    initial_size: int
    processed_size: int
    aux_size: int


def _bytes_for_bits(bit_count: int) -> int:
    return (bit_count + BITS_IN_BYTE - 1) // BITS_IN_BYTE


def huffman_encode(data: bytes) -> CodecResult:
    """
    Compress raw bytes.

    """
    tree = HuffmanEncodingTree(data)
    payload = tree.encode_payload(data)
    bits = tree.get_tree_info()
    topology_bits = len(bits)
    bits.extend(payload)
    packed = pack_with_padding(bits)

    payload_size = _bytes_for_bits(len(payload))
    aux_size = len(packed) - payload_size
    _dbg(
        f"encode in={len(data)} topology_bits={topology_bits} "
        f"payload_bits={len(payload)} out={len(packed)}"
    )
    return CodecResult(
        data=packed,
        initial_size=len(data),
        processed_size=payload_size,
        aux_size=aux_size,
    )


def huffman_decode(packed: bytes) -> CodecResult:
    """
    Restore the original bytes from a stream produced by `huffman_encode`.

    """
    bits = unpack_with_padding(packed)
    tree = HuffmanDecodingTree(bits)
    boundary = tree.position
    payload_size = _bytes_for_bits(len(bits) - boundary)

    out = bytearray()
    while not tree.eof():
        out.append(tree.decode_symbol())

    aux_size = len(packed) - payload_size
    _dbg(
        f"decode in={len(packed)} topology_bits={boundary} "
        f"out={len(out)}"
    )
    return CodecResult(
        data=bytes(out),
        initial_size=payload_size,
        processed_size=len(out),
        aux_size=aux_size,
    )
