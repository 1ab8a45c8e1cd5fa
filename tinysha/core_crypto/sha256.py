"""
SHA-256 Hash Implementation (From Scratch)

Implements the SHA-256 cryptographic hash function as defined in FIPS 180-4
without hashlib. Digests are returned as lowercase hex, either in the
standard big-endian word layout or with the bytes of each 32-bit word
reversed (word order kept).

Components:
- Padding: Pads message to multiple of 512 bits
- Message Schedule: Expands 16 words to 64 words
- Compression: 64 rounds of compression function
- Output: 64-character hex string (see encoding.py)
"""

import logging
from typing import List, Sequence, Tuple

from ..config import (
    BLOCK_SIZE,
    LENGTH_FIELD_SIZE,
    LENGTH_MASK,
    LENGTH_OFFSET,
    ROUNDS,
    WORD_MASK,
    WORD_SIZE,
    WORDS_PER_BLOCK,
)
from .encoding import serialize

logger = logging.getLogger(__name__)


# Initial hash values: first 32 bits of fractional parts of square roots of first 8 primes
H_INITIAL = (
    0x6a09e667, 0xbb67ae85, 0x3c6ef372, 0xa54ff53a,
    0x510e527f, 0x9b05688c, 0x1f83d9ab, 0x5be0cd19,
)

# Round constants: first 32 bits of fractional parts of cube roots of first 64 primes
K = (
    0x428a2f98, 0x71374491, 0xb5c0fbcf, 0xe9b5dba5,
    0x3956c25b, 0x59f111f1, 0x923f82a4, 0xab1c5ed5,
    0xd807aa98, 0x12835b01, 0x243185be, 0x550c7dc3,
    0x72be5d74, 0x80deb1fe, 0x9bdc06a7, 0xc19bf174,
    0xe49b69c1, 0xefbe4786, 0x0fc19dc6, 0x240ca1cc,
    0x2de92c6f, 0x4a7484aa, 0x5cb0a9dc, 0x76f988da,
    0x983e5152, 0xa831c66d, 0xb00327c8, 0xbf597fc7,
    0xc6e00bf3, 0xd5a79147, 0x06ca6351, 0x14292967,
    0x27b70a85, 0x2e1b2138, 0x4d2c6dfc, 0x53380d13,
    0x650a7354, 0x766a0abb, 0x81c2c92e, 0x92722c85,
    0xa2bfe8a1, 0xa81a664b, 0xc24b8b70, 0xc76c51a3,
    0xd192e819, 0xd6990624, 0xf40e3585, 0x106aa070,
    0x19a4c116, 0x1e376c08, 0x2748774c, 0x34b0bcb5,
    0x391c0cb3, 0x4ed8aa4a, 0x5b9cca4f, 0x682e6ff3,
    0x748f82ee, 0x78a5636f, 0x84c87814, 0x8cc70208,
    0x90befffa, 0xa4506ceb, 0xbef9a3f7, 0xc67178f2,
)

# FIPS 180-4 test vectors plus a couple of well-known strings
KNOWN_ANSWERS: Tuple[Tuple[bytes, str], ...] = (
    (b"", "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"),
    (b"abc", "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"),
    (b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
     "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1"),
    (b"abcdefghbcdefghicdefghijdefghijkefghijklfghijklmghijklmn"
     b"hijklmnoijklmnopjklmnopqklmnopqrlmnopqrsmnopqrstnopqrstu",
     "cf5b16a778af8380036ce59e7b0492370b249b11e8f07a51afac45037afee9d1"),
    (b"hello", "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"),
    (b"The quick brown fox jumps over the lazy dog",
     "d7a8fbb307d7809469ca9abcb0082e4f8d5651e46d3cdb762d02d0bf37c9e592"),
)


def right_rotate(value: int, amount: int) -> int:
    """Right rotate a 32-bit integer by the specified amount."""
    return ((value >> amount) | (value << (32 - amount))) & WORD_MASK


def ch(x: int, y: int, z: int) -> int:
    """Choice function: if x then y else z (bitwise)."""
    return ((x & y) ^ (~x & z)) & WORD_MASK


def maj(x: int, y: int, z: int) -> int:
    """Majority function: majority vote of bits."""
    return (x & y) ^ (x & z) ^ (y & z)


def sigma0(x: int) -> int:
    """Lowercase sigma 0: used in message schedule."""
    return right_rotate(x, 7) ^ right_rotate(x, 18) ^ (x >> 3)


def sigma1(x: int) -> int:
    """Lowercase sigma 1: used in message schedule."""
    return right_rotate(x, 17) ^ right_rotate(x, 19) ^ (x >> 10)


def big_sigma0(x: int) -> int:
    """Uppercase Sigma 0: used in compression."""
    return right_rotate(x, 2) ^ right_rotate(x, 13) ^ right_rotate(x, 22)


def big_sigma1(x: int) -> int:
    """Uppercase Sigma 1: used in compression."""
    return right_rotate(x, 6) ^ right_rotate(x, 11) ^ right_rotate(x, 25)


def _as_bytes(data) -> bytes:
    """Accept any bytes-like object; refuse text."""
    if isinstance(data, str):
        raise TypeError("Strings must be encoded before hashing")
    try:
        return bytes(memoryview(data))
    except TypeError:
        raise TypeError(
            f"a bytes-like object is required, not '{type(data).__name__}'"
        ) from None


def pad_message(data: bytes) -> bytes:
    """
    Pad the message according to SHA-256 specification.

    Padding rules:
    1. Append bit '1' to message (0x80 byte)
    2. Append zeros until message length ≡ 448 (mod 512)
    3. Append original message length as 64-bit big-endian integer

    Args:
        data: The original message bytes

    Returns:
        New padded buffer (length is a positive multiple of 64 bytes)
    """
    bit_length = (len(data) * 8) & LENGTH_MASK

    padded = bytearray(data)
    padded.append(0x80)

    # Zero-fill until there is exactly room for the length field
    padded.extend(b'\x00' * ((LENGTH_OFFSET - len(padded)) % BLOCK_SIZE))
    padded.extend(bit_length.to_bytes(LENGTH_FIELD_SIZE, byteorder='big'))

    return bytes(padded)


def message_schedule(block: bytes) -> List[int]:
    """
    Expand one 64-byte block into the 64-word message schedule.

    W[0..15] are the block's big-endian words. For i from 16 to 63:
        W[i] = σ0(W[i-15]) + σ1(W[i-2]) + W[i-7] + W[i-16]
    """
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"Block must be {BLOCK_SIZE} bytes, got {len(block)}")

    w = [
        int.from_bytes(block[i:i + WORD_SIZE], byteorder='big')
        for i in range(0, BLOCK_SIZE, WORD_SIZE)
    ]
    for i in range(WORDS_PER_BLOCK, ROUNDS):
        s0 = sigma0(w[i - 15])
        s1 = sigma1(w[i - 2])
        w.append((s0 + s1 + w[i - 7] + w[i - 16]) & WORD_MASK)
    return w


def compress(state: Sequence[int], w: Sequence[int]) -> List[int]:
    """
    Perform 64 rounds of compression on the state.

    Args:
        state: Current hash state (8 32-bit words), left untouched
        w: Message schedule (64 32-bit words)

    Returns:
        New hash state
    """
    a, b, c, d, e, f, g, h = state

    for i in range(ROUNDS):
        t1 = (h + big_sigma1(e) + ch(e, f, g) + K[i] + w[i]) & WORD_MASK
        t2 = (big_sigma0(a) + maj(a, b, c)) & WORD_MASK

        h = g
        g = f
        f = e
        e = (d + t1) & WORD_MASK
        d = c
        c = b
        b = a
        a = (t1 + t2) & WORD_MASK

    return [
        (word + delta) & WORD_MASK
        for word, delta in zip(state, (a, b, c, d, e, f, g, h))
    ]


def digest_words(data: bytes) -> List[int]:
    """Run every block of the padded message through the compression function."""
    padded = pad_message(data)
    logger.debug(
        "Hashing %d bytes as %d block(s)", len(data), len(padded) // BLOCK_SIZE
    )

    state = list(H_INITIAL)
    for offset in range(0, len(padded), BLOCK_SIZE):
        w = message_schedule(padded[offset:offset + BLOCK_SIZE])
        state = compress(state, w)
    return state


def sha256_hex(data, little_endian: bool = False) -> str:
    """
    Compute SHA-256 hash and return it as a hexadecimal string.

    Args:
        data: Input bytes to hash (bytes, bytearray or memoryview)
        little_endian: Reverse the bytes inside each 32-bit word of the
            digest while keeping the word order

    Returns:
        64-character lowercase hexadecimal string

    Example:
        >>> sha256_hex(b"hello")
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return serialize(digest_words(_as_bytes(data)), little_endian=little_endian)


def sha256_string(text: str, encoding: str = 'utf-8', little_endian: bool = False) -> str:
    """
    Compute SHA-256 hash of a string.

    Args:
        text: Input string to hash
        encoding: String encoding (default: utf-8)
        little_endian: See sha256_hex

    Returns:
        64-character lowercase hexadecimal string
    """
    return sha256_hex(text.encode(encoding), little_endian=little_endian)


def self_test() -> bool:
    """Check the implementation against KNOWN_ANSWERS."""
    all_passed = True
    for data, expected in KNOWN_ANSWERS:
        result = sha256_hex(data)
        if result != expected:
            all_passed = False
            logger.error(
                "Known-answer mismatch for %r: expected %s, got %s",
                data[:50], expected, result,
            )
    return all_passed
