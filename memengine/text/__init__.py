from .kmp import KMPAlgorithm
from .huffman import HuffmanCoding, HuffmanNode

__all__ = ["KMPAlgorithm", "HuffmanCoding", "HuffmanNode"]
