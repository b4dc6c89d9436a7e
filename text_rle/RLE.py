"""
Run-Length Encoding (RLE) for text

"WWWWWWWWWWWWBWWWWWWWWWWWWBBBWWWWWWWWWWWWWWWWWWWWWWWWB"  ->  "12WB12W3B24WB"
"""
from typing import TextIO

from text_rle.compressor_ABC import Compressor
from text_rle.errors import MalformedInput
from text_rle.log import get_logger

DIGITS = "0123456789"


def runs(text: str) -> list[tuple[int, str]]:
    """
    Splits text into maximal runs of identical characters.
    Returns a list of (count, character) tuples.
    """
    if not text:
        return []

    result = []
    current = text[0]
    count = 1

    for char in text[1:]:
        if char == current:
            count += 1
        else:
            result.append((count, current))
            current = char
            count = 1

    # Add the last run
    result.append((count, current))

    return result


def compress(text: str) -> str:
    """
    Compresses text using RLE.

    Args:
        text: Input text, letters and spaces

    Returns:
        Encoded text, e.g. "AABBBCCCC" -> "2A3B4C"
    """
    return "".join(char if count == 1 else f"{count}{char}" for count, char in runs(text))


def tokens(text: str) -> list[tuple[int, str]]:
    """
    Parses an encoded string into (count, character) tuples.

    A token is an optional decimal count followed by exactly one non-digit
    character. A missing count means 1, leading zeros are allowed and a
    zero count is a valid empty token.

    Raises:
        MalformedInput: if the string ends with digits that have no
            character after them
    """
    result = []
    start = 0

    for pos, char in enumerate(text):
        if char in DIGITS:
            continue
        prefix = text[start:pos]
        result.append((int(prefix.lstrip("0") or "0") if prefix else 1, char))
        start = pos + 1

    if start < len(text):
        raise MalformedInput(text, start)

    return result


def decompress(text: str) -> str:
    """
    Decompresses RLE text.

    Args:
        text: Encoded text, e.g. "2A3B4C"

    Returns:
        The reconstructed text, e.g. "AABBBCCCC"
    """
    return "".join(char * count for count, char in tokens(text))


class RLECompressor(Compressor):
    """A class for RLE compression and decompression of text streams."""

    def compress(self, input_stream: TextIO, output_stream: TextIO) -> str:
        data = input_stream.read()
        encoded = compress(data)
        output_stream.write(encoded)
        return self._report("compressed", data, encoded)

    def decompress(self, input_stream: TextIO, output_stream: TextIO) -> str:
        data = input_stream.read()
        decoded = decompress(data)
        output_stream.write(decoded)
        return self._report("decompressed", data, decoded)

    @staticmethod
    def _report(action: str, before: str, after: str) -> str:
        log_info = f"RLE {action} {len(before)} chars into {len(after)} chars"
        get_logger().debug(log_info)
        return log_info
