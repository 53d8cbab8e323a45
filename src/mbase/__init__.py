'''
Self-describing binary-to-text encoding: a single leading character names
the base used for the rest of the string.
'''

from .errors import *
from .codecs import Codec, BinaryCodec, BitpackCodec, RadixCodec
from .registry import BaseSpec, BaseDefinition, Registry, register, BASES, DEFAULT_REGISTRY
from .multibase import (
    Inspection, format, parse, inspect, format_body, parse_body,
    encode, decode, codec, codec_of, is_encoded
)
from . import errors, table

__all__ = (
    *errors.__all__,
    'Codec', 'BinaryCodec', 'BitpackCodec', 'RadixCodec',
    'BaseSpec', 'BaseDefinition', 'Registry', 'register',
    'BASES', 'DEFAULT_REGISTRY',
    'Inspection', 'format', 'parse', 'inspect', 'format_body', 'parse_body',
    'encode', 'decode', 'codec', 'codec_of', 'is_encoded',
    'table'
)
