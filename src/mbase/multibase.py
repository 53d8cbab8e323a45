'''
Multibase dispatch: adds, strips and interprets the single prefix character
which identifies the base used for the rest of the string.
'''

from typing import NamedTuple

from .errors import EmptyPayloadError, TooShortError, UnknownBaseError, UnknownPrefixError
from .registry import DEFAULT_REGISTRY, BaseDefinition, Registry

__all__ = (
    'Inspection',
    'format', 'parse', 'inspect', 'format_body', 'parse_body',
    'encode', 'decode', 'codec', 'codec_of', 'is_encoded'
)

class Inspection(NamedTuple):
    '''Result of inspecting a multibase string.'''
    prefix: str
    name: str
    data: bytes

def codec(name: str, *, registry: Registry = DEFAULT_REGISTRY) -> BaseDefinition:
    """Returns the base registered under the given identifier."""
    if (base := registry.lookup_identifier(name)) is None:
        raise UnknownBaseError(name)
    return base

def codec_of(data: str, *, registry: Registry = DEFAULT_REGISTRY) -> BaseDefinition:
    """Returns the base used to encode the given multibase string."""
    if len(data) < 2:
        raise TooShortError(data)
    if (base := registry.lookup_prefix(data[0])) is None:
        raise UnknownPrefixError(data[0])
    return base

def is_encoded(data: str, *, registry: Registry = DEFAULT_REGISTRY) -> bool:
    """Checks if the string has a known prefix and a body."""
    return len(data) >= 2 and registry.lookup_prefix(data[0]) is not None

def format_body(name: str, data: bytes, *, registry: Registry = DEFAULT_REGISTRY) -> str:
    """Encodes the data with the base, without the prefix."""
    base = codec(name, registry=registry)
    if not data:
        raise EmptyPayloadError(base.name)
    return base.encode(data)

def format(name: str, data: bytes, *, registry: Registry = DEFAULT_REGISTRY) -> str:
    """Encodes the data with the base, prefixed by the base's code point."""
    base = codec(name, registry=registry)
    return base.prefix + format_body(base.name, data, registry=registry)

def parse_body(name: str, body: str, *, registry: Registry = DEFAULT_REGISTRY) -> bytes:
    """Decodes an unprefixed body which was encoded with the base."""
    return codec(name, registry=registry).decode(body)

def parse(data: str, *, registry: Registry = DEFAULT_REGISTRY) -> bytes:
    """Decode the multibase-encoded data."""
    return inspect(data, registry=registry).data

def inspect(data: str, *, registry: Registry = DEFAULT_REGISTRY) -> Inspection:
    """Decodes the string, also reporting which prefix and base were used."""
    base = codec_of(data, registry=registry)
    return Inspection(base.prefix, base.name, base.decode(data[1:]))

# Aliases
encode = format
decode = parse
