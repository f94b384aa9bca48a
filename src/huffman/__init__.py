from src.huffman.codec import CodecResult, huffman_decode, huffman_encode
from src.huffman.decoding_tree import HuffmanDecodingTree
from src.huffman.encoding_tree import HuffmanEncodingTree
from src.huffman.tree import Internal, Leaf

__all__ = [
    "CodecResult",
    "huffman_encode",
    "huffman_decode",
    "HuffmanEncodingTree",
    "HuffmanDecodingTree",
    "Leaf",
    "Internal",
]
