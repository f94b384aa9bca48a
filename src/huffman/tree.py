"""
Huffman tree nodes shared by the encoder and the decoder.

A node is either a `Leaf` holding one byte value or an `Internal` node
owning exactly two children. Child 0 is reached with bit 0, child 1 with
bit 1.
"""
from dataclasses import dataclass
from typing import Iterator, Tuple, Union


@dataclass
class Leaf:
    symbol: int


@dataclass
class Internal:
    left: "Node"
    right: "Node"

    def child(self, bit: int) -> "Node":
        return self.right if bit else self.left


Node = Union[Leaf, Internal]


def iter_leaves(node: Node) -> Iterator[Tuple[int, Tuple[int, ...]]]:
    """
    Yield `(symbol, code)` for every leaf in pre-order.

    The code is the root-to-leaf path: 0 for every left edge, 1 for every
    right edge.
    """
    stack = [(node, ())]
    while stack:
        current, path = stack.pop()
        if isinstance(current, Leaf):
            yield current.symbol, path
        else:
            # right pushed first so that left is visited first
            stack.append((current.right, path + (1,)))
            stack.append((current.left, path + (0,)))


def leaf_count(node: Node) -> int:
    return sum(1 for _ in iter_leaves(node))
