'''
The registry of supported multibase encodings. Definitions are resolved
against the code table and checked for collisions once, after which the
registry only supports lookups.
'''

from types import MappingProxyType
from typing import Annotated, Final, Iterable, Iterator, Mapping, NamedTuple, Optional
import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ._common import Immutable
from .codecs import (
    Codec, BinaryCodec, RadixCodec, hex_codec, base32_codec, base64_codec,
    OCTAL, DECIMAL, BASE32HEX, BASE32Z, BASE36, BASE58BTC, BASE58FLICKR
)
from .errors import (
    DuplicateIdentifierError, DuplicatePrefixError,
    MissingCodePointError, UnresolvedCodecError
)
from .table import CODE_TABLE

__all__ = (
    'BaseSpec', 'BaseDefinition', 'Registry', 'register',
    'ALIASES', 'BASES', 'DEFAULT_REGISTRY'
)

logger = logging.getLogger(__name__)

class BaseSpec(BaseModel):
    '''
    Source definition of a base before registration. Either `codec` is
    given explicitly or it's derived from `alphabet` with a `RadixCodec`.
    '''
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: Annotated[
        str,
        Field(min_length=1, description="Base identifier, eg base58btc.")
    ]
    codec: Annotated[
        Optional[Codec],
        Field(description="Explicit codec for bases with bespoke packing.")
    ] = None
    alphabet: Annotated[
        Optional[str],
        Field(description="Radix alphabet, digit 0 first.")
    ] = None

    @field_validator('alphabet')
    @classmethod
    def _distinct_digits(cls, v: Optional[str]):
        if v is not None:
            if len(v) < 2:
                raise ValueError("alphabet needs at least two digits")
            if len(set(v)) != len(v):
                raise ValueError(f"alphabet {v!r} has repeated digits")
        return v

    def resolve(self) -> Optional[Codec]:
        '''Codec to register this base with, None if there's nothing to use.'''
        if self.codec is not None:
            return self.codec
        if self.alphabet is not None:
            return RadixCodec(self.alphabet)
        return None

class BaseDefinition(NamedTuple):
    '''A registered base with its prefix and resolved codec.'''
    name: str
    prefix: str
    codec: Codec

    def encode(self, data: bytes) -> str:
        return self.codec.encode(data)

    def decode(self, data: str) -> bytes:
        return self.codec.decode(data)

class Registry(Immutable):
    '''
    Read-only table of base definitions, indexed by identifier and prefix.
    Construction either admits every definition or raises the first
    `RegistryError` encountered, there's no partially built registry.
    '''
    __slots__ = ('_bases', '_prefixes')

    _bases: Mapping[str, BaseDefinition]
    _prefixes: Mapping[str, BaseDefinition]

    def __init__(self, specs: Iterable[BaseSpec], table: Mapping[str, str] = CODE_TABLE):
        bases: dict[str, BaseDefinition] = {}
        prefixes: dict[str, BaseDefinition] = {}
        for spec in specs:
            if (prefix := table.get(spec.name)) is None:
                raise MissingCodePointError(spec.name)
            if (codec := spec.resolve()) is None:
                raise UnresolvedCodecError(spec.name)
            if spec.name in bases:
                raise DuplicateIdentifierError(spec.name)
            if other := prefixes.get(prefix):
                raise DuplicatePrefixError(prefix, spec.name, other.name)

            bases[spec.name] = prefixes[prefix] = BaseDefinition(
                spec.name, prefix, codec
            )
            logger.debug("Registered %s with prefix %r: %r", spec.name, prefix, codec)

        self._freeze(
            _bases=MappingProxyType(bases),
            _prefixes=MappingProxyType(prefixes)
        )
        logger.debug("Multibase registry built with %d bases", len(bases))

    def lookup_identifier(self, name: str) -> Optional[BaseDefinition]:
        """Returns the base registered under the identifier or an alias of it."""
        if (base := self._bases.get(name)) is not None:
            return base
        return self._bases.get(ALIASES.get(name, name))

    def lookup_prefix(self, prefix: str) -> Optional[BaseDefinition]:
        """Returns the base which uses the prefix."""
        return self._prefixes.get(prefix)

    def names(self) -> tuple[str, ...]:
        return tuple(self._bases)

    def __iter__(self) -> Iterator[BaseDefinition]:
        return iter(self._bases.values())

    def __len__(self):
        return len(self._bases)

    def __contains__(self, name: object):
        return isinstance(name, str) and self.lookup_identifier(name) is not None

    def __repr__(self):
        return f"Registry({', '.join(self._bases)})"

def register(specs: Iterable[BaseSpec], table: Mapping[str, str] = CODE_TABLE) -> Registry:
    """Resolves and validates the definitions into a new registry."""
    return Registry(specs, table)

ALIASES: Final[Mapping[str, str]] = MappingProxyType({
    'base58': 'base58btc',
    'base16upper': 'BASE16',
    'base32upper': 'BASE32',
    'base32padupper': 'BASE32PAD',
    'base32hexupper': 'BASE32HEX',
    'base32hexpadupper': 'BASE32HEXPAD',
    'base36upper': 'BASE36',
})
'''Alternative spellings accepted by lookups, not registry entries.'''

BASES: Final[tuple[BaseSpec, ...]] = (
    BaseSpec(name='base2', codec=BinaryCodec()),
    BaseSpec(name='base8', alphabet=OCTAL),
    BaseSpec(name='base10', alphabet=DECIMAL),

    BaseSpec(name='base16', codec=hex_codec()),
    BaseSpec(name='BASE16', codec=hex_codec(upper=True)),

    BaseSpec(name='base32hex', codec=base32_codec(BASE32HEX)),
    BaseSpec(name='BASE32HEX', codec=base32_codec(BASE32HEX, upper=True)),
    BaseSpec(name='base32hexpad', codec=base32_codec(BASE32HEX, pad=True)),
    BaseSpec(name='BASE32HEXPAD', codec=base32_codec(BASE32HEX, upper=True, pad=True)),
    BaseSpec(name='base32', codec=base32_codec()),
    BaseSpec(name='BASE32', codec=base32_codec(upper=True)),
    BaseSpec(name='base32pad', codec=base32_codec(pad=True)),
    BaseSpec(name='BASE32PAD', codec=base32_codec(upper=True, pad=True)),
    BaseSpec(name='base32z', codec=base32_codec(BASE32Z)),

    BaseSpec(name='base36', codec=RadixCodec(BASE36, fold_case=True)),
    BaseSpec(name='BASE36', codec=RadixCodec(BASE36.upper(), fold_case=True)),

    BaseSpec(name='base58btc', alphabet=BASE58BTC),
    BaseSpec(name='base58flickr', alphabet=BASE58FLICKR),

    BaseSpec(name='base64', codec=base64_codec()),
    BaseSpec(name='base64pad', codec=base64_codec(pad=True)),
    BaseSpec(name='base64url', codec=base64_codec(urlsafe=True)),
    BaseSpec(name='base64urlpad', codec=base64_codec(urlsafe=True, pad=True)),

    # base1 is reserved in the code table but has no codec
)
'''Every supported base, in registration order.'''

DEFAULT_REGISTRY: Final = register(BASES)
'''Registry built from `BASES` at import.'''
