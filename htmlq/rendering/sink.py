"""
Text accumulation sink.
The renderer streams markup in chunks; this collects them into one string.
"""

import codecs
from typing import List, Union


class TextRenderer:
    """
    Append-only buffer for rendered markup.

    Bytes are decoded as UTF-8 across writes, so a character split between
    two chunks comes out whole once its last byte arrives.
    """

    def __init__(self):
        self._chunks: List[str] = []
        self._decoder = codecs.getincrementaldecoder('utf-8')()

    def write(self, chunk: Union[str, bytes]) -> int:
        """
        Append a chunk of output.

        Args:
            chunk: Text, or UTF-8 encoded bytes

        Returns:
            int: Number of characters (or bytes) accepted
        """
        if isinstance(chunk, (bytes, bytearray)):
            self._chunks.append(self._decoder.decode(bytes(chunk)))
        else:
            self._chunks.append(chunk)
        return len(chunk)

    def getvalue(self) -> str:
        """Return everything written so far, minus any incomplete trailing character."""
        return "".join(self._chunks)

    def __str__(self) -> str:
        return self.getvalue()

    def __len__(self) -> int:
        return sum(len(c) for c in self._chunks)
