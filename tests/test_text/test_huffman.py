"""
Tests for HuffmanCoding.

Exact bit patterns depend on tie-breaking, so most tests assert round-trip
fidelity and the prefix property rather than specific codes.
"""

import pytest

from memengine.core.exceptions import InvalidArgumentError
from memengine.text import HuffmanCoding


def is_prefix_free(codes: dict) -> bool:
    values = list(codes.values())
    return not any(a != b and b.startswith(a) for a in values for b in values)


class TestHuffmanRoundTrip:

    def setup_method(self):
        self.huffman = HuffmanCoding()

    @pytest.mark.parametrize("text", [
        "a",
        "aaaaaaa",
        "ab",
        "hello world",
        "abracadabra",
        "The quick brown fox jumps over the lazy dog",
        "üñíçødé ✓ text",
    ])
    def test_round_trip(self, text):
        encoded = self.huffman.encode(text)
        assert set(encoded) <= {"0", "1"}
        assert self.huffman.decode(encoded) == text

    def test_empty_text(self):
        assert self.huffman.encode("") == ""
        assert self.huffman.decode("") == ""
        assert self.huffman.get_huffman_code() == {}

    def test_none_text(self):
        assert self.huffman.encode(None) == ""
        assert self.huffman.decode(None) == ""

    def test_single_symbol_gets_code_zero(self):
        encoded = self.huffman.encode("zzzz")
        assert self.huffman.get_huffman_code() == {"z": "0"}
        assert encoded == "0000"
        assert self.huffman.decode(encoded) == "zzzz"

    def test_documented_codes(self):
        encoded = self.huffman.encode("aaabbc")
        assert self.huffman.get_huffman_code() == {"a": "0", "c": "10", "b": "11"}
        assert encoded == "000111110"

    def test_codes_are_prefix_free(self):
        self.huffman.encode("mississippi river banks")
        codes = self.huffman.get_huffman_code()
        assert is_prefix_free(codes)
        assert set(codes) == set("mississippi river banks")

    def test_frequent_symbols_get_shorter_codes(self):
        self.huffman.encode("e" * 50 + "t" * 20 + "q")
        codes = self.huffman.get_huffman_code()
        assert len(codes["e"]) <= len(codes["t"]) <= len(codes["q"])

    def test_returned_codes_are_a_copy(self):
        self.huffman.encode("abc")
        self.huffman.get_huffman_code()["a"] = "999"
        assert self.huffman.get_huffman_code()["a"] != "999"

    def test_decode_uses_latest_tree(self):
        self.huffman.encode("aaaa")
        encoded = self.huffman.encode("abcabc")
        assert self.huffman.decode(encoded) == "abcabc"


class TestHuffmanCompressionRatio:

    def setup_method(self):
        self.huffman = HuffmanCoding()

    def test_documented_ratio(self):
        encoded = self.huffman.encode("aaabbc")
        # 9 bits against 48
        assert self.huffman.get_compression_ratio("aaabbc", encoded) == pytest.approx(81.25)

    def test_empty_original(self):
        assert self.huffman.get_compression_ratio("", "") == 0.0

    def test_skewed_text_compresses(self):
        text = "a" * 100 + "b"
        encoded = self.huffman.encode(text)
        assert self.huffman.get_compression_ratio(text, encoded) > 80.0


class TestHuffmanDecodeErrors:

    def setup_method(self):
        self.huffman = HuffmanCoding()

    def test_decode_without_tree(self):
        with pytest.raises(InvalidArgumentError, match="encode something first"):
            self.huffman.decode("0101")

    def test_decode_after_empty_encode(self):
        self.huffman.encode("abc")
        self.huffman.encode("")
        with pytest.raises(InvalidArgumentError):
            self.huffman.decode("0")

    def test_invalid_character(self):
        self.huffman.encode("abc")
        with pytest.raises(InvalidArgumentError, match="Invalid bit"):
            self.huffman.decode("01x")

    def test_single_symbol_rejects_one_bits(self):
        self.huffman.encode("zz")
        with pytest.raises(InvalidArgumentError):
            self.huffman.decode("01")

    def test_truncated_code(self):
        self.huffman.encode("aaabbc")
        with pytest.raises(InvalidArgumentError, match="middle of a code"):
            self.huffman.decode("01")
