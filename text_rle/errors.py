"""Errors raised by the RLE codec"""


class MalformedInput(ValueError):
    """
    Raised when an encoded string does not follow the token grammar.

    Args:
        text: The encoded string that failed to parse
        position: Index where the unterminated digit prefix starts
    """

    def __init__(self, text: str, position: int):
        self.text = text
        self.position = position
        super().__init__(
            f"Count at position {position} is not followed by a character: {text[position:]!r}"
        )
