import itertools
import sys
from collections import Counter
from pathlib import Path

import pytest
from dahuffman import HuffmanCodec

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from src.huffman.decoding_tree import MAX_TREE_DEPTH, HuffmanDecodingTree
from src.huffman.encoding_tree import HuffmanEncodingTree, build_tree, count_frequencies
from src.huffman.tree import Internal, Leaf, iter_leaves, leaf_count

TEST_INPUT = b"aabac"


def _tree_equiv(t1, t2) -> bool:
    """Structural equality, allowing children of any node to be swapped."""
    if isinstance(t1, Leaf) or isinstance(t2, Leaf):
        return isinstance(t1, Leaf) and isinstance(t2, Leaf) and t1.symbol == t2.symbol
    return (
        _tree_equiv(t1.left, t2.left) and _tree_equiv(t1.right, t2.right)
    ) or (
        _tree_equiv(t1.left, t2.right) and _tree_equiv(t1.right, t2.left)
    )


def _walk(node, code) -> int:
    for bit in code:
        node = node.child(bit)
    assert isinstance(node, Leaf)
    return node.symbol


def test_tree_construction_simple():
    tree = HuffmanEncodingTree(TEST_INPUT)
    expected = Internal(Leaf(ord("a")), Internal(Leaf(ord("b")), Leaf(ord("c"))))
    assert _tree_equiv(tree.root, expected)


def test_tree_construction_same_char():
    tree = HuffmanEncodingTree(b"aaaa")
    assert _tree_equiv(tree.root, Internal(Leaf(ord("a")), Leaf(ord("b"))))


def test_tree_construction_same_char_wraps():
    tree = HuffmanEncodingTree(bytes([255, 255, 255, 255]))
    assert _tree_equiv(tree.root, Internal(Leaf(255), Leaf(0)))


def test_tree_construction_empty():
    tree = HuffmanEncodingTree(b"")
    assert _tree_equiv(tree.root, Internal(Leaf(0), Leaf(1)))
    assert leaf_count(tree.root) == 2


def test_count_frequencies_degenerate_inputs():
    freq = count_frequencies(b"")
    assert freq[0] == 1 and freq[1] == 1 and sum(freq) == 2

    freq = count_frequencies(b"zzz")
    assert freq[ord("z")] == 3 and freq[ord("{")] == 1 and sum(freq) == 4


def test_equal_frequencies_merge_in_insertion_order():
    freq = [0] * 256
    for symbol in (3, 1, 2, 0):
        freq[symbol] = 1
    root = build_tree(freq)
    assert root == Internal(Internal(Leaf(0), Leaf(1)), Internal(Leaf(2), Leaf(3)))


def test_codes_assigned_correctly():
    tree = HuffmanEncodingTree(TEST_INPUT)
    for symbol, code in enumerate(tree.codes):
        if code:
            assert _walk(tree.root, code) == symbol
        else:
            assert symbol not in TEST_INPUT
    assert tree.get_code(ord("a")) == tree.codes[ord("a")]
    assert len(tree.get_code(ord("a"))) == 1


@pytest.mark.parametrize(
    "data",
    [b"", b"x", TEST_INPUT, bytes(range(256)), b"abracadabra" * 7 + bytes([0, 255])],
)
def test_codes_are_prefix_free(data):
    tree = HuffmanEncodingTree(data)
    codes = [code for code in tree.codes if code]
    assert all(len(code) >= 1 for code in codes)
    for a, b in itertools.permutations(codes, 2):
        assert a[: len(b)] != b


def test_iter_leaves_preorder():
    root = Internal(Leaf(7), Internal(Leaf(8), Leaf(9)))
    assert list(iter_leaves(root)) == [(7, (0,)), (8, (1, 0)), (9, (1, 1))]


def test_tree_info_layout():
    tree = HuffmanEncodingTree(b"")
    # internal, leaf 0, leaf 1
    assert tree.get_tree_info() == [0, 1] + [0] * 8 + [1] + [1] + [0] * 7


def test_tree_info_able_to_rebuild():
    tree = HuffmanEncodingTree(TEST_INPUT)
    info = tree.get_tree_info()
    rebuilt = HuffmanDecodingTree(info)
    assert rebuilt.root == tree.root
    assert rebuilt.position == len(info)
    assert rebuilt.eof()


def test_decoding_tree_walks_every_code():
    data = bytes(range(256)) + b"hello world" * 3
    tree = HuffmanEncodingTree(data)
    info = tree.get_tree_info()
    for symbol in set(data):
        bits = info + list(tree.get_code(symbol))
        decoder = HuffmanDecodingTree(bits)
        assert decoder.position == len(info)
        assert decoder.decode_symbol() == symbol
        assert decoder.eof()


def test_decoding_tree_start_offset():
    tree = HuffmanEncodingTree(TEST_INPUT)
    bits = [1, 1, 1] + tree.get_tree_info()
    decoder = HuffmanDecodingTree(bits, start=3)
    assert decoder.root == tree.root


def test_decoding_tree_truncated_topology():
    info = HuffmanEncodingTree(TEST_INPUT).get_tree_info()
    with pytest.raises(ValueError, match="Truncated"):
        HuffmanDecodingTree(info[:-3])


def _chain_topology(leaves: int):
    """Topology of a right-leaning chain: every internal node has a leaf on its left."""
    bits = []
    for symbol in range(leaves - 1):
        bits += [0, 1] + [(symbol >> pos) & 1 for pos in range(8)]
    last = leaves - 1
    return bits + [1] + [(last >> pos) & 1 for pos in range(8)]


def test_decoding_tree_accepts_deepest_valid_tree():
    bits = _chain_topology(256)
    decoder = HuffmanDecodingTree(bits)
    assert decoder.position == len(bits)

    node, depth = decoder.root, 0
    while isinstance(node, Internal):
        node, depth = node.right, depth + 1
    assert depth == MAX_TREE_DEPTH
    assert node == Leaf(255)


def test_decoding_tree_rejects_overly_deep_topology():
    with pytest.raises(ValueError, match="deeper than 255"):
        HuffmanDecodingTree([0] * 2000)


def test_decoding_tree_truncated_code():
    tree = HuffmanEncodingTree(TEST_INPUT)
    code = tree.get_code(ord("b"))
    decoder = HuffmanDecodingTree(tree.get_tree_info() + list(code[:-1]))
    with pytest.raises(ValueError, match="Truncated"):
        decoder.decode_symbol()


@pytest.mark.parametrize(
    "data",
    [TEST_INPUT, b"mississippi river", bytes(range(256)) * 2 + b"\x00" * 50],
)
def test_code_lengths_match_reference_codec(data):
    freq = Counter(data)
    reference = HuffmanCodec.from_frequencies(freq, eof=next(iter(freq)))
    reference_bits = sum(
        freq[symbol] * bitsize
        for symbol, (bitsize, _) in reference.get_code_table().items()
    )

    tree = HuffmanEncodingTree(data)
    assert len(tree.encode_payload(data)) == reference_bits
