"""
Fixed SHA-256 parameters.

Everything here is defined by FIPS 180-4; nothing is read from the
environment.
"""

# Sizes in bytes
BLOCK_SIZE = 64
WORD_SIZE = 4
LENGTH_FIELD_SIZE = 8
DIGEST_SIZE = 32

# Padding stops zero-filling once len % BLOCK_SIZE reaches this offset
LENGTH_OFFSET = BLOCK_SIZE - LENGTH_FIELD_SIZE

WORDS_PER_BLOCK = BLOCK_SIZE // WORD_SIZE
ROUNDS = 64

# Mask for 32-bit arithmetic
WORD_MASK = 0xFFFFFFFF

# Bit-length field is a 64-bit counter
LENGTH_MASK = (1 << 64) - 1

HEX_DIGEST_LENGTH = DIGEST_SIZE * 2
