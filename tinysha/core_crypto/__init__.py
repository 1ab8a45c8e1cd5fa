# Core Cryptography Module
"""
SHA-256 implementation:
- sha256: padding, message schedule, compression, public hashing functions
- encoding: digest serialization and hex encoding
"""
