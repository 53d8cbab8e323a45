import base64

import base58
import pytest

from mbase.codecs import (
    BinaryCodec, BitpackCodec, RadixCodec,
    hex_codec, base32_codec, base64_codec,
    BASE32HEX, BASE58BTC, OCTAL
)
from mbase.errors import InvalidLengthError, InvalidSymbolError

SAMPLES = [
    b'\x00',
    b'\x00\x00\x01',
    b'\xff',
    b'yes mani !',
    b'\x01\x02\x03\x04\x05',
    bytes(range(256)),
]

class TestBinary:
    def test_encode(self):
        assert BinaryCodec().encode(b'\xff\x01') == '1111111100000001'

    def test_decode_left_pads(self):
        assert BinaryCodec().decode('1') == b'\x01'
        assert BinaryCodec().decode('100000000') == b'\x01\x00'

    def test_invalid_symbol(self):
        with pytest.raises(InvalidSymbolError) as e:
            BinaryCodec().decode('01012')
        assert e.value.symbol == '2'
        assert e.value.position == 4

class TestBitpack:
    @pytest.mark.parametrize('data', SAMPLES)
    def test_hex_matches_stdlib(self, data):
        assert hex_codec().encode(data) == data.hex()
        assert hex_codec(upper=True).encode(data) == data.hex().upper()

    def test_hex_case_insensitive(self):
        for codec in (hex_codec(), hex_codec(upper=True)):
            assert codec.decode('DeadBEEF') == b'\xde\xad\xbe\xef'

    def test_hex_invalid_symbol_keeps_case(self):
        with pytest.raises(InvalidSymbolError) as e:
            hex_codec(upper=True).decode('aG')
        assert e.value.symbol == 'G'
        assert e.value.position == 1

    def test_hex_odd_length(self):
        with pytest.raises(InvalidLengthError):
            hex_codec().decode('abc')

    def test_hex_invalid_symbol(self):
        with pytest.raises(InvalidSymbolError) as e:
            hex_codec().decode('0g')
        assert e.value.symbol == 'g'

    @pytest.mark.parametrize('data', SAMPLES)
    def test_base32_matches_stdlib(self, data):
        padded = base64.b32encode(data).decode()
        assert base32_codec(upper=True, pad=True).encode(data) == padded
        assert base32_codec(pad=True).encode(data) == padded.lower()
        assert base32_codec().encode(data) == padded.rstrip('=').lower()

        hexpadded = base64.b32hexencode(data).decode()
        assert base32_codec(BASE32HEX, upper=True, pad=True).encode(data) == hexpadded
        assert base32_codec(BASE32HEX).encode(data) == hexpadded.rstrip('=').lower()

    def test_base32_tolerant_decode(self):
        codec = base32_codec()
        for text in ('pfsxgidnmfxgsibb', 'PFSXGIDNMFXGSIBB', 'PfSxGiDnMfXgSiBb'):
            assert codec.decode(text) == b'yes mani !'
        assert codec.decode('my======') == codec.decode('MY') == b'f'

    @pytest.mark.parametrize('length', [1, 3, 6, 9])
    def test_base32_invalid_length(self, length):
        with pytest.raises(InvalidLengthError):
            base32_codec().decode('a' * length)

    @pytest.mark.parametrize('data', SAMPLES)
    def test_base64_matches_stdlib(self, data):
        padded = base64.b64encode(data).decode()
        urlpadded = base64.urlsafe_b64encode(data).decode()
        assert base64_codec(pad=True).encode(data) == padded
        assert base64_codec().encode(data) == padded.rstrip('=')
        assert base64_codec(urlsafe=True, pad=True).encode(data) == urlpadded
        assert base64_codec(urlsafe=True).encode(data) == urlpadded.rstrip('=')

    @pytest.mark.parametrize('length,padding', [(1, '=='), (2, '='), (3, ''), (4, '==')])
    def test_base64_padding(self, length, padding):
        encoded = base64_codec(urlsafe=True, pad=True).encode(b'\x00' * length)
        assert encoded == 'A' * len(encoded.rstrip('=')) + padding

    def test_base64_accepts_both_paddings(self):
        for codec in (base64_codec(), base64_codec(pad=True)):
            assert codec.decode('eWVzIG1hbmkgIQ') == b'yes mani !'
            assert codec.decode('eWVzIG1hbmkgIQ==') == b'yes mani !'

    def test_base64_is_case_sensitive(self):
        assert base64_codec().decode('AA') != base64_codec().decode('aa')

    def test_base64_alphabets_are_separate(self):
        data = b'\xfb\xff'
        assert base64_codec().encode(data) == '+/8'
        assert base64_codec(urlsafe=True).encode(data) == '-_8'
        with pytest.raises(InvalidSymbolError):
            base64_codec().decode('-_8')
        with pytest.raises(InvalidSymbolError):
            base64_codec(urlsafe=True).decode('+/8')

    def test_base64_invalid_length(self):
        with pytest.raises(InvalidLengthError):
            base64_codec().decode('AAAAA')

    def test_bad_alphabet(self):
        with pytest.raises(ValueError):
            BitpackCodec(4, '0123')
        with pytest.raises(ValueError):
            BitpackCodec(1, '01', padding='0')
        with pytest.raises(ValueError):
            BitpackCodec(1, '01', pad=True)

class TestRadix:
    @pytest.mark.parametrize('data', SAMPLES)
    def test_base58_matches_reference(self, data):
        assert RadixCodec(BASE58BTC).encode(data) == base58.b58encode(data).decode()

    @pytest.mark.parametrize('data', SAMPLES)
    def test_roundtrip(self, data):
        for digits in (OCTAL, '0123456789', BASE58BTC):
            codec = RadixCodec(digits)
            assert codec.decode(codec.encode(data)) == data

    def test_leading_zeros(self):
        codec = RadixCodec(BASE58BTC)
        assert codec.encode(b'\x00\x00\x01') == '112'
        assert codec.encode(b'\x01') == '2'
        assert codec.decode('112') == b'\x00\x00\x01'

    def test_all_zeros(self):
        codec = RadixCodec(OCTAL)
        assert codec.encode(b'\x00' * 5) == '00000'
        assert codec.decode('00000') == b'\x00' * 5

    def test_decimal(self):
        data = b'yes mani !'
        assert RadixCodec('0123456789').encode(data) == str(int.from_bytes(data, 'big'))

    def test_invalid_symbol(self):
        with pytest.raises(InvalidSymbolError) as e:
            RadixCodec(BASE58BTC).decode('11O0')
        assert e.value.symbol == 'O'
        assert e.value.position == 2

    def test_fold_case(self):
        codec = RadixCodec('0123456789abcdefghijklmnopqrstuvwxyz', fold_case=True)
        assert codec.decode('2LCPZO5YIKIDYNFL') == codec.decode('2lcpzo5yikidynfl')

    def test_invalid_symbol_keeps_case(self):
        codec = RadixCodec('0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ', fold_case=True)
        assert codec.decode('zz') == codec.decode('ZZ')
        with pytest.raises(InvalidSymbolError) as e:
            codec.decode('az!')
        assert e.value.symbol == '!'
        with pytest.raises(InvalidSymbolError) as e:
            codec.decode('aß')
        assert e.value.symbol == 'ß'
        assert e.value.position == 1

    def test_bad_alphabet(self):
        with pytest.raises(ValueError):
            RadixCodec('aa')
        with pytest.raises(ValueError):
            RadixCodec('a')

def test_codecs_are_immutable():
    codec = RadixCodec(BASE58BTC)
    with pytest.raises(TypeError):
        codec.digits = OCTAL
