"""
Digest serialization.

Turns the final 8-word hash state into bytes and then into lowercase hex.
The optional little-endian layout reverses the bytes inside every 32-bit
word but leaves the words in their original order, so it is NOT the same
as reversing the whole digest:

    big-endian:    ba7816bf 8f01cfea ...
    little_endian: bf1678ba eacf018f ...
"""

from typing import Sequence

from ..config import WORD_SIZE


def words_to_bytes(words: Sequence[int]) -> bytes:
    """Write each 32-bit word as 4 big-endian bytes, preserving word order."""
    return b''.join(word.to_bytes(WORD_SIZE, byteorder='big') for word in words)


def swap_word_bytes(digest: bytes) -> bytes:
    """
    Reverse the byte order within each 4-byte group.

    Args:
        digest: Bytes whose length is a multiple of 4

    Returns:
        New byte string; the input is not modified
    """
    if len(digest) % WORD_SIZE:
        raise ValueError(f"Digest length must be a multiple of {WORD_SIZE}, got {len(digest)}")
    return b''.join(
        digest[i:i + WORD_SIZE][::-1] for i in range(0, len(digest), WORD_SIZE)
    )


def to_hex(digest: bytes) -> str:
    return digest.hex()


def serialize(words: Sequence[int], little_endian: bool = False) -> str:
    """Render a hash state as the 64-character hex digest."""
    digest = words_to_bytes(words)
    if little_endian:
        digest = swap_word_bytes(digest)
    return to_hex(digest)
