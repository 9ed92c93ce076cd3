"""
CosHash — Python Implementation

Pure Python (zero dependencies) digest with a sine-based compression step.
Not a cryptographic hash.

Usage:
    from coshash import cos_hash, cos_hash_hex

    digest = cos_hash(b"Hello")      # 64 bytes
    hex_str = cos_hash_hex(b"Hello")  # 128-char hex string

Command line:
    python -m coshash              # interactive prompt
    python -m coshash "Hello"      # hash an argument
"""

from .coshash import cos_hash, cos_hash_hex

__all__ = ['cos_hash', 'cos_hash_hex']
__version__ = '1.0.0'
