"""
Tokenizer for the indexing and query pipeline.

Tokenization rules:
1. Any character that is not an ASCII letter or digit is a delimiter
2. Runs of delimiters collapse (no empty tokens, ever)
3. Each token is lowercased

Non-ASCII letters are delimiters too: "café" yields "caf".
Indexed output depends on this, so it must not be "fixed" to Unicode words.
"""

import re
from typing import Iterator

# ASCII only - [A-Za-z0-9] rather than \w, which would match accents and CJK
TOKEN_PATTERN = re.compile(r'[A-Za-z0-9]+')


class TokenStream:
    """
    Lazy, restartable sequence of tokens over a piece of text.

    Nothing is scanned until iteration starts. Every new iteration
    rescans the text from the beginning, so a stream can be consumed
    more than once.
    """

    __slots__ = ('_text',)

    def __init__(self, text: str):
        self._text = text or ''

    def __iter__(self) -> Iterator[str]:
        for match in TOKEN_PATTERN.finditer(self._text):
            yield match.group(0).lower()

    def __repr__(self) -> str:
        preview = self._text[:40]
        return f"TokenStream({preview!r})"


def tokenize(text: str) -> TokenStream:
    """
    Split text into lowercase ASCII-alphanumeric tokens.

    Args:
        text: Raw document body or query string

    Returns:
        TokenStream (iterate it, or wrap in list())

    Examples:
        >>> list(tokenize("The Cat sat"))
        ['the', 'cat', 'sat']

        >>> list(tokenize("--user@example.com,, path/to/file--"))
        ['user', 'example', 'com', 'path', 'to', 'file']

        >>> list(tokenize("naïve café"))
        ['na', 've', 'caf']

        >>> list(tokenize("   "))
        []
    """
    return TokenStream(text)
