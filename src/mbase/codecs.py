'''
Codecs which turn whole byte buffers into text and back. These know nothing
about multibase prefixes, they only implement the body encoding of a base.

There are three families:
- `BinaryCodec` expands every byte into eight '0'/'1' characters.
- `BitpackCodec` packs a fixed number of bits into every character
  (hex, the RFC 4648 base32 and base64 variants).
- `RadixCodec` treats the buffer as one big-endian integer and converts it
  to an arbitrary alphabet (base8, base10, base36, base58).
'''

from abc import ABC, abstractmethod
import math

from ._common import Immutable
from .errors import InvalidLengthError, InvalidSymbolError

__all__ = (
    'Codec', 'DigitCodec', 'BinaryCodec', 'BitpackCodec', 'RadixCodec',
    'hex_codec', 'base32_codec', 'base64_codec',
    'HEX', 'BASE32', 'BASE32HEX', 'BASE32Z', 'BASE64', 'BASE64URL',
    'OCTAL', 'DECIMAL', 'BASE36', 'BASE58BTC', 'BASE58FLICKR'
)

_b16 = '0123456789abcdef'
_b10 = _b16[:10]
_abc = 'abcdefghijklmnopqrstuvwxyz'
_ABC = _abc.upper()
_b58 = 'abcdefghijkmnopqrstuvwxyz'
_B58 = 'ABCDEFGHJKLMNPQRSTUVWXYZ'
_b64 = _ABC + _abc + _b10

HEX = _b16
OCTAL = _b10[:8]
DECIMAL = _b10
BASE32 = _abc + _b10[2:8]
BASE32HEX = _b10 + _abc[:22]
BASE32Z = 'ybndrfg8ejkmcpqxot1uwisza345h769'
BASE36 = _b10 + _abc
BASE58BTC = _b10[1:] + _B58 + _b58
BASE58FLICKR = _b10[1:] + _b58 + _B58
BASE64 = f'{_b64}+/'
BASE64URL = f'{_b64}-_'

class Codec(Immutable, ABC):
    """Abstract base class for multibase body codecs."""
    __slots__ = ()

    def __call__(self, x: bytes, /) -> str:
        """Encodes the given bytes into a string representation."""
        return self.encode(x)

    @abstractmethod
    def encode(self, x: bytes, /) -> str:
        """Encodes the given bytes into a string representation."""

    @abstractmethod
    def decode(self, x: str, /) -> bytes:
        """Decodes the given string representation back into bytes."""

class BinaryCodec(Codec):
    """Eight '0'/'1' characters per byte, most significant bit first."""
    __slots__ = ()

    digits = '01'

    def encode(self, bs: bytes) -> str:
        return ''.join(f'{byte:08b}' for byte in bs)

    def decode(self, s: str) -> bytes:
        for i, digit in enumerate(s):
            if digit not in '01':
                raise InvalidSymbolError(digit, i)

        # Well-formed input is always a multiple of 8, anything else is
        #  treated as missing leading zeros.
        s = s.zfill(-(-len(s) // 8) * 8)
        return bytes(int(s[i:i + 8], 2) for i in range(0, len(s), 8))

    def __repr__(self):
        return "BinaryCodec()"

class DigitCodec(Codec):
    """A codec driven by an alphabet of single-character digits."""
    __slots__ = ('digits', 'fold_case', '_index')

    digits: str
    fold_case: bool
    '''Decoding ignores case, the alphabet's case is only used to encode.'''
    _index: dict[str, int]

    def __init__(self, digits: str, fold_case: bool = False):
        if len(set(digits)) != len(digits):
            raise ValueError(f"alphabet {digits!r} has repeated digits")
        if len(digits) < 2:
            raise ValueError("alphabet needs at least two digits")
        index = {d: i for i, d in enumerate(digits)}
        if fold_case:
            for d, i in list(index.items()):
                for alt in (d.lower(), d.upper()):
                    if len(alt) == 1:
                        index.setdefault(alt, i)
        self._freeze(digits=digits, fold_case=fold_case, _index=index)

    @property
    def radix(self) -> int:
        return len(self.digits)

    def _digit(self, s: str, i: int) -> int:
        try: return self._index[s[i]]
        except KeyError:
            raise InvalidSymbolError(s[i], i) from None

class BitpackCodec(DigitCodec):
    """Codec for encoding bytes into a bit-packed string."""
    __slots__ = ('bits', 'group', 'padding', 'pad')

    bits: int
    group: int
    '''Number of characters in a whole padded group.'''
    padding: str
    '''Padding character stripped on decode, or empty if the family has none.'''
    pad: bool
    '''Whether encoding fills the last group with `padding`.'''

    def __init__(self, bits: int, digits: str, padding: str = '', pad: bool = False, fold_case: bool = False):
        if len(digits) != 1 << bits:
            raise ValueError(
                f"a {bits}-bit alphabet needs {1 << bits} digits, got {len(digits)}"
            )
        if len(padding) > 1 or (padding and padding in digits):
            raise ValueError(f"invalid padding character {padding!r}")
        if pad and not padding:
            raise ValueError("padded codec requires a padding character")
        super().__init__(digits, fold_case)
        self._freeze(
            bits=bits,
            group=math.lcm(8, bits) // bits,
            padding=padding,
            pad=pad
        )

    def encode(self, bs: bytes) -> str:
        """Encodes bytes into a bit-packed string."""
        mask = (1 << self.bits) - 1
        bits = 0
        value = 0
        res: list[str] = []
        for byte in bs:
            value = (value << 8) | byte
            bits += 8
            while bits >= self.bits:
                bits -= self.bits
                res.append(self.digits[(value >> bits) & mask])
            value &= (1 << bits) - 1

        # Get the last bits
        if bits > 0:
            res.append(self.digits[(value << (self.bits - bits)) & mask])

        if self.pad:
            res.append(self.padding * (-len(res) % self.group))
        return ''.join(res)

    def decode(self, s: str) -> bytes:
        """Decodes a bit-packed string back into bytes."""
        # Padded and unpadded input are both accepted
        if self.padding:
            s = s.rstrip(self.padding)
        if len(s) * self.bits % 8 >= self.bits:
            raise InvalidLengthError(
                len(s), f"{len(s)} digits of {self.bits} bits leave a partial byte"
            )

        out = bytearray()
        value = 0
        bits = 0
        for i in range(len(s)):
            value = (value << self.bits) | self._digit(s, i)
            bits += self.bits
            if bits >= 8:
                bits -= 8
                out.append(value >> bits)
                value &= (1 << bits) - 1

        return bytes(out)

    def __repr__(self):
        return f"BitpackCodec({self.bits}, {self.digits!r}, {self.padding!r}, pad={self.pad})"

class RadixCodec(DigitCodec):
    """
    Converts the buffer as a big-endian integer into an arbitrary alphabet.
    Each leading zero byte is kept as one leading zero digit (`digits[0]`),
    so b'\\0\\1' and b'\\1' don't collide.
    """
    __slots__ = ()

    def encode(self, bs: bytes) -> str:
        body = bs.lstrip(b'\0')
        zeros = len(bs) - len(body)
        x = int.from_bytes(body, byteorder='big', signed=False)
        res: list[str] = []
        while x > 0:
            x, d = divmod(x, self.radix)
            res.append(self.digits[d])
        res.append(self.digits[0] * zeros)
        return ''.join(reversed(res))

    def decode(self, s: str) -> bytes:
        zeros = 0
        while zeros < len(s) and self._index.get(s[zeros]) == 0:
            zeros += 1
        x = 0
        for i in range(zeros, len(s)):
            x = x * self.radix + self._digit(s, i)

        # Convert the integer back to bytes
        return b'\0' * zeros + x.to_bytes((x.bit_length() + 7) // 8, byteorder='big')

    def __repr__(self):
        return f"RadixCodec({self.digits!r})"

def hex_codec(upper: bool = False) -> BitpackCodec:
    """Base16, decoding is case-insensitive either way."""
    return BitpackCodec(4, HEX.upper() if upper else HEX, fold_case=True)

def base32_codec(digits: str = BASE32, *, upper: bool = False, pad: bool = False) -> BitpackCodec:
    """RFC 4648 base32 over the given alphabet, case-insensitive on decode."""
    return BitpackCodec(
        5, digits.upper() if upper else digits, "=", pad, fold_case=True
    )

def base64_codec(*, urlsafe: bool = False, pad: bool = False) -> BitpackCodec:
    """RFC 4648 base64 with the standard or URL-safe alphabet."""
    return BitpackCodec(6, BASE64URL if urlsafe else BASE64, "=", pad)
