'''
Exceptions raised by multibase registration, encoding and decoding.

Every exception derives from `MultibaseError`, which is itself a
`ValueError`, so code which only cares that the input was bad can catch
that and code which cares about the reason can catch the specific class.
'''

from typing import Optional

__all__ = (
    'MultibaseError', 'RegistryError',
    'DuplicateIdentifierError', 'DuplicatePrefixError',
    'MissingCodePointError', 'UnresolvedCodecError',
    'UnknownBaseError', 'UnknownPrefixError',
    'EmptyPayloadError', 'TooShortError',
    'InvalidSymbolError', 'InvalidLengthError'
)

class MultibaseError(ValueError):
    '''Base class for all multibase errors.'''

class RegistryError(MultibaseError):
    '''The static list of bases is inconsistent. Always a programming error.'''

class DuplicateIdentifierError(RegistryError):
    def __init__(self, name: str):
        super().__init__(f"base {name!r} is registered more than once")
        self.name = name

class DuplicatePrefixError(RegistryError):
    def __init__(self, prefix: str, name: str, existing: str):
        super().__init__(
            f"prefix {prefix!r} of base {name!r} is already used by {existing!r}"
        )
        self.prefix = prefix
        self.name = name
        self.existing = existing

class MissingCodePointError(RegistryError):
    def __init__(self, name: str):
        super().__init__(f"base {name!r} has no entry in the code table")
        self.name = name

class UnresolvedCodecError(RegistryError):
    def __init__(self, name: str):
        super().__init__(f"base {name!r} has neither a codec nor an alphabet")
        self.name = name

class UnknownBaseError(MultibaseError):
    def __init__(self, name: str):
        super().__init__(f"unknown multibase encoding {name!r}")
        self.name = name

class UnknownPrefixError(MultibaseError):
    def __init__(self, prefix: str):
        super().__init__(f"no multibase encoding uses prefix {prefix!r}")
        self.prefix = prefix

class EmptyPayloadError(MultibaseError):
    def __init__(self, name: str):
        super().__init__(f"refusing to encode empty data with {name!r}")
        self.name = name

class TooShortError(MultibaseError):
    def __init__(self, data: str):
        super().__init__(
            f"multibase string must have a prefix and a body, got {data!r}"
        )
        self.data = data

class InvalidSymbolError(MultibaseError):
    '''A character outside of the codec's alphabet.'''
    def __init__(self, symbol: str, position: Optional[int] = None):
        where = "" if position is None else f" at position {position}"
        super().__init__(f'invalid digit "{symbol}"{where}')
        self.symbol = symbol
        self.position = position

class InvalidLengthError(MultibaseError):
    '''An encoded length which the codec's bit-packing can't produce.'''
    def __init__(self, length: int, reason: str):
        super().__init__(f"invalid encoded length {length}: {reason}")
        self.length = length
