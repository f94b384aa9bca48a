import heapq
import itertools
from typing import List, Tuple

from src.huffman.tree import Internal, Leaf, Node, iter_leaves
from src.utils.bits_bytes_utils import BITS_IN_BYTE

TABLE_SIZE = 1 << BITS_IN_BYTE


def count_frequencies(data: bytes) -> List[int]:
    """
    Count byte frequencies over the whole 0..255 alphabet.

    An empty input is treated as a single occurrence of byte 0, and an input
    with only one distinct byte gets a second symbol (the next byte value,
    wrapping 255 -> 0) with frequency 1, so the tree always has two leaves.
    """
    freq = [0] * TABLE_SIZE
    for byte in data:
        freq[byte] += 1

    present = [symbol for symbol in range(TABLE_SIZE) if freq[symbol]]
    if not present:
        freq[0] = 1
        present = [0]
    if len(present) == 1:
        freq[(present[0] + 1) % TABLE_SIZE] += 1
    return freq


def build_tree(freq: List[int]) -> Node:
    """
    Classic greedy Huffman merge.

    Heap entries are `(frequency, order, subtree)`; equal frequencies are
    popped in insertion order. Leaves are inserted by ascending symbol.
    """
    order = itertools.count()
    heap: List[Tuple[int, int, Node]] = [
        (count, next(order), Leaf(symbol))
        for symbol, count in enumerate(freq)
        if count
    ]
    heapq.heapify(heap)

    while len(heap) > 1:
        freq_left, _, left = heapq.heappop(heap)
        freq_right, _, right = heapq.heappop(heap)
        heapq.heappush(heap, (freq_left + freq_right, next(order), Internal(left, right)))

    return heap[0][2]


class HuffmanEncodingTree:
    """
    Huffman tree built from the full input buffer.

    - root: the tree (always at least two leaves)
    - codes: 256 entries, empty tuple for bytes not present in the input
    """

    def __init__(self, data: bytes):
        self.frequencies = count_frequencies(data)
        self.root = build_tree(self.frequencies)
        self.codes: List[Tuple[int, ...]] = [()] * TABLE_SIZE
        for symbol, code in iter_leaves(self.root):
            self.codes[symbol] = code

    def get_code(self, symbol: int) -> Tuple[int, ...]:
        return self.codes[symbol]

    def get_tree_info(self) -> List[int]:
        """
        Serialize the tree shape in pre-order.

        A leaf is `1` followed by its 8 symbol bits (LSB-first), an internal
        node is `0` followed by its left and right subtrees.
        """
        info: List[int] = []
        _tree_info_dfs(self.root, info)
        return info

    def encode_payload(self, data: bytes) -> List[int]:
        bits: List[int] = []
        for byte in data:
            bits.extend(self.codes[byte])
        return bits


def _tree_info_dfs(node: Node, info: List[int]) -> None:
    if isinstance(node, Leaf):
        info.append(1)
        info.extend((node.symbol >> pos) & 1 for pos in range(BITS_IN_BYTE))
        return
    info.append(0)
    _tree_info_dfs(node.left, info)
    _tree_info_dfs(node.right, info)
