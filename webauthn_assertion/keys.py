from collections.abc import Mapping

from .const import KEY_FORMAT_COSE, KEY_FORMAT_JWK, KEY_FORMAT_SPKI, KEY_USAGE_VERIFY
from .exceptions import InvalidKeyDataException


BYTES_TYPES = (bytes, bytearray, memoryview)


class KeyMaterial:
    '''Public key material in one of the supported encodings.'''

    format = None

    def __init__(self, data):
        self.data = data

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.data == other.data

    __hash__ = None

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self.data)


class Spki(KeyMaterial):
    '''DER encoded SubjectPublicKeyInfo.'''

    format = KEY_FORMAT_SPKI

    def __init__(self, data):
        if not isinstance(data, BYTES_TYPES):
            raise InvalidKeyDataException('SPKI key data must be bytes.')
        super().__init__(bytes(data))


class Jwk(KeyMaterial):
    '''JSON Web Key members, e.g. ``{'kty': 'OKP', 'crv': 'Ed25519', 'x': ...}``.'''

    format = KEY_FORMAT_JWK

    def __init__(self, data):
        if not isinstance(data, Mapping) or 'kty' not in data:
            raise InvalidKeyDataException('A JWK needs a "kty" member.')
        super().__init__(dict(data))


class CoseKey(KeyMaterial):
    '''CBOR encoded COSE_Key, as found in attested credential data.'''

    format = KEY_FORMAT_COSE

    def __init__(self, data):
        if not isinstance(data, BYTES_TYPES):
            raise InvalidKeyDataException('COSE key data must be bytes.')
        super().__init__(bytes(data))


def as_key_material(data):
    '''Wrap caller supplied key data in its ``KeyMaterial`` variant.

    Bytes are taken as SPKI and mappings as JWK; a mapping without a
    ``kty`` member is rejected.
    '''
    if isinstance(data, KeyMaterial):
        return data
    if isinstance(data, BYTES_TYPES):
        return Spki(data)
    if isinstance(data, Mapping):
        return Jwk(data)
    raise InvalidKeyDataException(
        'Unsupported key data type: {}.'.format(type(data).__name__))


class KeyHandle:
    '''A verify-only public key imported by a provider.

    ``algorithm`` holds the import parameters (``name`` and, for ECDSA,
    ``namedCurve``). The wrapped key object belongs to the provider that
    created the handle.
    '''

    __slots__ = ('_algorithm', '_cose_algorithm', '_extractable', '_key')

    def __init__(self, algorithm, cose_algorithm, extractable, key):
        self._algorithm = algorithm
        self._cose_algorithm = cose_algorithm
        self._extractable = bool(extractable)
        self._key = key

    @property
    def algorithm(self):
        return self._algorithm

    @property
    def algorithm_name(self):
        return self._algorithm['name']

    @property
    def cose_algorithm(self):
        return self._cose_algorithm

    @property
    def extractable(self):
        return self._extractable

    @property
    def usages(self):
        return (KEY_USAGE_VERIFY,)

    @property
    def key(self):
        return self._key

    def __repr__(self):
        return '<KeyHandle {} ({}, extractable={})>'.format(
            self.algorithm_name, self._cose_algorithm, self._extractable)
