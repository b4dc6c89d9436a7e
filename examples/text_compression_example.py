"""
Example script demonstrating text compression with RLE.
"""

import sys
from pathlib import Path

# Add the parent directory to Python path
sys.path.append(str(Path(__file__).parent.parent))

from text_rle.errors import MalformedInput
from text_rle.log import init_logger
from text_rle.RLE import RLECompressor


def main():
    init_logger(debug=True)
    compressor = RLECompressor()

    samples = [
        "WWWWWWWWWWWWBWWWWWWWWWWWWBBBWWWWWWWWWWWWWWWWWWWWWWWWB",
        "AABCCCDEEEE",
        "  hsqq qww  ",
    ]
    for text in samples:
        encoded, _ = compressor.compress_text(text)
        decoded, _ = compressor.decompress_text(encoded)

        print(f"\n{text!r} -> {encoded!r}")
        print(f"Compression ratio: {len(text) / len(encoded):.2f}x")
        print(f"Round trip ok: {decoded == text}")

    # Trailing count with no character
    try:
        compressor.decompress_text("12W5")
    except MalformedInput as e:
        print(f"\nRejected: {e}")


if __name__ == "__main__":
    main()
