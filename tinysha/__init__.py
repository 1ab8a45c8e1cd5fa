"""
tinysha - SHA-256 from scratch.

    >>> import tinysha
    >>> tinysha.hash(b"abc")
    'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'
    >>> tinysha.hash(b"abc", little_endian=True)
    'bf1678baeacf018fde4041412322ae5da36103b09c7a179661ff10b4ad1500f2'
"""

import logging

from .core_crypto.sha256 import (
    KNOWN_ANSWERS,
    self_test,
    sha256_hex,
    sha256_string,
)

# Library stays silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

hash = sha256_hex

__all__ = [
    'hash',
    'sha256_hex',
    'sha256_string',
    'self_test',
    'KNOWN_ANSWERS',
]

__version__ = "1.0.0"
