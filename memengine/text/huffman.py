from collections import Counter
from dataclasses import dataclass
from itertools import count
from typing import Dict, Optional

from ..core.exceptions import InvalidArgumentError
from ..ordering.min_heap import MinHeap
from ..utils.logger import get_logger

logger = get_logger(__name__)

BITS_PER_CHAR = 8


@dataclass
class HuffmanNode:
    character: Optional[str]
    frequency: int
    left: Optional['HuffmanNode'] = None
    right: Optional['HuffmanNode'] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class HuffmanCoding:
    """
    🗜️ Huffman prefix-code compressor 🗜️

    Frequencies are counted per character, then the two lightest nodes are
    merged under a new parent until one tree remains. A symbol's code is
    its root-to-leaf path (left = 0, right = 1).

    Tree for "aaabbc":
    ┌────────────────────────────┐
    │            (6)             │
    │          0/   \\1           │
    │        a:3    (3)          │
    │             0/   \\1        │
    │           c:1    b:2       │
    │                            │
    │ codes: a=0  c=10  b=11     │
    └────────────────────────────┘

    Ties between equal weights are broken by the order nodes entered the
    priority queue; callers should rely on round-trip fidelity, not on
    particular bit patterns.

    decode uses the tree built by the most recent encode.
    """

    def __init__(self):
        self._root: Optional[HuffmanNode] = None
        self._codes: Dict[str, str] = {}

    def _build_tree(self, text: str) -> HuffmanNode:
        frequencies = Counter(text)
        sequence = count()

        queue = MinHeap()
        for character, frequency in frequencies.items():
            queue.insert((frequency, next(sequence), HuffmanNode(character, frequency)))

        while queue.size() > 1:
            left_weight, _, left = queue.extract_min()
            right_weight, _, right = queue.extract_min()
            parent = HuffmanNode(None, left_weight + right_weight, left, right)
            queue.insert((parent.frequency, next(sequence), parent))

        logger.debug("Built Huffman tree over %d symbols", len(frequencies))
        return queue.extract_min()[2]

    def _generate_codes(self, root: HuffmanNode) -> Dict[str, str]:
        codes: Dict[str, str] = {}
        stack = [(root, "")]

        while stack:
            node, code = stack.pop()
            if node.is_leaf:
                # a lone symbol still needs a non-empty code
                codes[node.character] = code or "0"
                continue
            stack.append((node.right, code + "1"))
            stack.append((node.left, code + "0"))

        return codes

    def encode(self, text: Optional[str]) -> str:
        """
        Encode text as a string of '0'/'1' characters.

        Empty input gives "" and leaves no tree behind.
        """
        if not text:
            self._root = None
            self._codes = {}
            return ""

        self._root = self._build_tree(text)
        self._codes = self._generate_codes(self._root)
        return "".join(self._codes[character] for character in text)

    def decode(self, encoded: Optional[str]) -> str:
        """
        Decode a bit string produced by the last encode call.

        Raises:
            InvalidArgumentError: On a character other than '0'/'1', on a
                bit string that stops part-way through a code, or when
                there is no tree to decode with
        """
        if not encoded:
            return ""
        if self._root is None:
            raise InvalidArgumentError("No Huffman tree available; encode something first")

        root = self._root
        decoded = []

        if root.is_leaf:
            for bit in encoded:
                if bit != "0":
                    raise InvalidArgumentError(f"Invalid bit {bit!r} for a single-symbol code")
                decoded.append(root.character)
            return "".join(decoded)

        current = root
        for bit in encoded:
            if bit == "0":
                current = current.left
            elif bit == "1":
                current = current.right
            else:
                raise InvalidArgumentError(f"Invalid bit {bit!r} in encoded input")

            if current.is_leaf:
                decoded.append(current.character)
                current = root

        if current is not root:
            raise InvalidArgumentError("Encoded input ends in the middle of a code")

        return "".join(decoded)

    def get_compression_ratio(self, original: str, encoded: str) -> float:
        """
        Space saved against 8 bits per character, as a percentage.

        0.0 for an empty original.
        """
        if not original:
            return 0.0
        original_bits = len(original) * BITS_PER_CHAR
        return (1.0 - len(encoded) / original_bits) * 100

    def get_huffman_code(self) -> Dict[str, str]:
        return dict(self._codes)
