'''
The canonical multibase code table, mapping base identifiers to the single
character which prefixes text encoded with them. Entries must match the
published multibase table exactly, anything else breaks interoperability.
'''

from types import MappingProxyType
from typing import Final, Mapping, Optional

__all__ = ('CODE_TABLE', 'NAMES', 'RESERVED', 'code_point', 'name_of')

CODE_TABLE: Final[Mapping[str, str]] = MappingProxyType({
    # Unary, reserved without a codec
    'base1': '1',

    'base2': '0',
    'base8': '7',
    'base10': '9',

    'base16': 'f',
    'BASE16': 'F',

    'base32hex': 'v',
    'BASE32HEX': 'V',
    'base32hexpad': 't',
    'BASE32HEXPAD': 'T',
    'base32': 'b',
    'BASE32': 'B',
    'base32pad': 'c',
    'BASE32PAD': 'C',
    'base32z': 'h',

    'base36': 'k',
    'BASE36': 'K',

    'base58btc': 'z',
    'base58flickr': 'Z',

    'base64': 'm',
    'base64pad': 'M',
    'base64url': 'u',
    'base64urlpad': 'U',
})
'''Base identifier -> prefix code point.'''

NAMES: Final[Mapping[str, str]] = MappingProxyType({
    v: k for k, v in CODE_TABLE.items()
})
'''Prefix code point -> base identifier.'''

RESERVED: Final = frozenset({'base1'})
'''Identifiers with an assigned prefix but no defined algorithm.'''

def code_point(name: str) -> Optional[str]:
    """Returns the prefix assigned to the base, if any."""
    return CODE_TABLE.get(name)

def name_of(prefix: str) -> Optional[str]:
    """Returns the base identifier assigned to the prefix, if any."""
    return NAMES.get(prefix)
