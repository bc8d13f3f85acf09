"""
sprout.sourcemap - Debugger source maps

Submodules:
- vlq: Base64 VLQ encoding of signed integers
- generator: Delta-encoded version 3 "mappings" strings and documents
"""

from sprout.sourcemap.generator import (
    SOURCE_MAP_VERSION,
    Mapping,
    SourceMapGenerator,
    decode_mappings,
    encode_mappings,
    sort_mappings,
)
from sprout.sourcemap.vlq import VLQDecodeError, decode_integers, encode_integers

__all__ = [
    "SOURCE_MAP_VERSION",
    "Mapping",
    "SourceMapGenerator",
    "VLQDecodeError",
    "decode_integers",
    "decode_mappings",
    "encode_integers",
    "encode_mappings",
    "sort_mappings",
]
