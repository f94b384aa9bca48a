from typing import Sequence

from src.huffman.tree import Internal, Leaf, Node
from src.utils.bits_bytes_utils import BITS_IN_BYTE, read_byte

# 256 leaves at most, so no leaf sits deeper than 255 edges
MAX_TREE_DEPTH = (1 << BITS_IN_BYTE) - 1


class HuffmanDecodingTree:
    """
    Huffman tree rebuilt from the topology bits at the front of a stream.

    The tree keeps a cursor into `bits`. Right after construction the cursor
    sits on the first payload bit; every `decode_symbol` call moves it past
    one code.
    """

    def __init__(self, bits: Sequence[int], start: int = 0):
        self.bits = bits
        self.position = start
        self.root = self._tree_build_dfs(0)

    def eof(self) -> bool:
        return self.position >= len(self.bits)

    def decode_symbol(self) -> int:
        node = self.root
        while isinstance(node, Internal):
            node = node.child(self._next_bit())
        return node.symbol

    def _next_bit(self) -> int:
        if self.position >= len(self.bits):
            raise ValueError(f"Truncated stream: no bit left at position {self.position}")
        bit = self.bits[self.position]
        self.position += 1
        return bit

    def _tree_build_dfs(self, depth: int) -> Node:
        if self._next_bit():
            if self.position + BITS_IN_BYTE > len(self.bits):
                raise ValueError("Truncated stream: leaf symbol cut short")
            symbol = read_byte(self.bits, self.position)
            self.position += BITS_IN_BYTE
            return Leaf(symbol)
        if depth >= MAX_TREE_DEPTH:
            raise ValueError(
                f"Malformed stream: tree deeper than {MAX_TREE_DEPTH} levels "
                f"at position {self.position}"
            )
        left = self._tree_build_dfs(depth + 1)
        right = self._tree_build_dfs(depth + 1)
        return Internal(left, right)
