'''Signature primitives backed by the ``cryptography`` package.

The verifier only talks to a provider through ``digest``, ``import_key``,
``verify`` and ``export_key``, so a different backend can be passed in
wherever a ``provider`` argument is accepted.
'''
import logging

import cbor2

from cryptography.exceptions import InvalidSignature
from cryptography.exceptions import UnsupportedAlgorithm as CryptographyUnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric.ec import (
    ECDSA,
    SECP256R1,
    EllipticCurvePublicKey,
    EllipticCurvePublicNumbers,
)
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey
from cryptography.hazmat.primitives.asymmetric.padding import PKCS1v15
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey, RSAPublicNumbers
from cryptography.hazmat.primitives.asymmetric.utils import encode_dss_signature
from cryptography.hazmat.primitives.serialization import (
    Encoding,
    PublicFormat,
    load_der_public_key,
)

from .algorithms import COSE_ALG_LABELS
from .const import (
    ALG_NAME_ECDSA,
    ALG_NAME_ED25519,
    ALG_NAME_RSASSA_PKCS1_V1_5,
    COSE_CRV_ED25519,
    COSE_CRV_P256,
    COSE_KEYNAME_ALG,
    COSE_KEYNAME_KTY,
    COSE_KEYPARAM_CRV,
    COSE_KEYPARAM_RSA_E,
    COSE_KEYPARAM_RSA_N,
    COSE_KEYPARAM_X,
    COSE_KEYPARAM_Y,
    COSE_KTY_EC2,
    COSE_KTY_OKP,
    COSE_KTY_RSA,
    CURVE_P256,
    HASH_SHA256,
    KEY_FORMAT_COSE,
    KEY_FORMAT_JWK,
    KEY_FORMAT_SPKI,
    KEY_USAGE_VERIFY,
)
from .exceptions import (
    InvalidKeyDataException,
    KeyNotExtractableException,
    UnsupportedAlgorithmException,
    UnsupportedKeyFormatException,
)
from .keys import KeyHandle
from .util import int_from_b64, int_to_b64, webauthn_b64_decode, webauthn_b64_encode


logger = logging.getLogger(__name__)


HASHES = {
    HASH_SHA256: hashes.SHA256,
}

# Coordinate size in bytes of the supported curves.
CURVE_SIZES = {
    CURVE_P256: 32,
}


def _hash_for(name):
    found = HASHES.get(name)
    if found is None:
        raise UnsupportedAlgorithmException(
            'Unsupported hash algorithm. Got "{}".'.format(name))
    return found()


def _load_spki(data):
    try:
        return load_der_public_key(data)
    except (ValueError, CryptographyUnsupportedAlgorithm) as e:
        raise InvalidKeyDataException(
            'Unable to decode SPKI public key: {}.'.format(e)) from e


def _load_jwk(jwk, extractable):
    key_ops = jwk.get('key_ops')
    if key_ops is not None and KEY_USAGE_VERIFY not in key_ops:
        raise InvalidKeyDataException('JWK "key_ops" does not allow "verify".')
    if extractable and jwk.get('ext') is False:
        raise InvalidKeyDataException(
            'JWK is marked non-extractable ("ext": false).')

    kty = jwk['kty']
    try:
        if kty == 'OKP':
            if jwk.get('crv') != ALG_NAME_ED25519:
                raise InvalidKeyDataException(
                    'Unsupported OKP curve: {}.'.format(jwk.get('crv')))
            return Ed25519PublicKey.from_public_bytes(webauthn_b64_decode(jwk['x']))
        elif kty == 'EC':
            if jwk.get('crv') != CURVE_P256:
                raise InvalidKeyDataException(
                    'Unsupported EC curve: {}.'.format(jwk.get('crv')))
            return EllipticCurvePublicNumbers(
                int_from_b64(jwk['x']),
                int_from_b64(jwk['y']),
                SECP256R1()).public_key()
        elif kty == 'RSA':
            return RSAPublicNumbers(
                int_from_b64(jwk['e']),
                int_from_b64(jwk['n'])).public_key()
    except KeyError as e:
        raise InvalidKeyDataException(
            'JWK is missing the {} member.'.format(e)) from e
    except (ValueError, TypeError) as e:
        raise InvalidKeyDataException(
            'Unable to decode JWK public key: {}.'.format(e)) from e

    raise InvalidKeyDataException('Unsupported JWK key type: {}.'.format(kty))


def _load_cose(data, cose_algorithm):
    try:
        keydict = cbor2.loads(data)
    except (cbor2.CBORDecodeError, ValueError) as e:
        raise InvalidKeyDataException(
            'Unable to decode COSE key: {}.'.format(e)) from e
    if not isinstance(keydict, dict) or COSE_KEYNAME_KTY not in keydict:
        raise InvalidKeyDataException('COSE key must be a map with a "kty".')

    alg = keydict.get(COSE_KEYNAME_ALG)
    if alg is not None and alg != cose_algorithm:
        raise InvalidKeyDataException(
            'COSE key algorithm {} does not match {}.'.format(alg, cose_algorithm))

    kty = keydict[COSE_KEYNAME_KTY]
    try:
        if kty == COSE_KTY_OKP:
            if keydict.get(COSE_KEYPARAM_CRV) != COSE_CRV_ED25519:
                raise InvalidKeyDataException('Unsupported OKP curve.')
            return Ed25519PublicKey.from_public_bytes(keydict[COSE_KEYPARAM_X])
        elif kty == COSE_KTY_EC2:
            if keydict.get(COSE_KEYPARAM_CRV) != COSE_CRV_P256:
                raise InvalidKeyDataException('Unsupported EC2 curve.')
            x = keydict[COSE_KEYPARAM_X]
            y = keydict[COSE_KEYPARAM_Y]
            if len(x) != CURVE_SIZES[CURVE_P256] or len(y) != CURVE_SIZES[CURVE_P256]:
                raise InvalidKeyDataException('Bad public key(x, y).')
            return EllipticCurvePublicNumbers(
                int.from_bytes(x, 'big'),
                int.from_bytes(y, 'big'),
                SECP256R1()).public_key()
        elif kty == COSE_KTY_RSA:
            return RSAPublicNumbers(
                int.from_bytes(keydict[COSE_KEYPARAM_RSA_E], 'big'),
                int.from_bytes(keydict[COSE_KEYPARAM_RSA_N], 'big')).public_key()
    except KeyError as e:
        raise InvalidKeyDataException(
            'Credential public key must match COSE_Key spec (missing {}).'.format(e)) from e
    except (ValueError, TypeError) as e:
        raise InvalidKeyDataException(
            'Unable to decode COSE key: {}.'.format(e)) from e

    raise InvalidKeyDataException('Unsupported COSE key type: {}.'.format(kty))


def _check_key_type(public_key, params):
    name = params['name']
    if name == ALG_NAME_ED25519:
        matches = isinstance(public_key, Ed25519PublicKey)
    elif name == ALG_NAME_ECDSA:
        matches = (isinstance(public_key, EllipticCurvePublicKey)
                   and isinstance(public_key.curve, SECP256R1)
                   and params.get('namedCurve') == CURVE_P256)
    elif name == ALG_NAME_RSASSA_PKCS1_V1_5:
        matches = isinstance(public_key, RSAPublicKey)
    else:
        raise UnsupportedAlgorithmException(
            'Unknown key algorithm. Got "{}".'.format(name))

    if not matches:
        raise InvalidKeyDataException(
            'Key data does not hold a {} public key.'.format(name))


class CryptographyProvider:

    def digest(self, algorithm, data):
        h = hashes.Hash(_hash_for(algorithm))
        h.update(bytes(data))
        return h.finalize()

    def import_key(self, key_format, data, params, extractable=False,
                   cose_algorithm=None):
        '''Import public key material for signature verification only.

        :param key_format: 'spki', 'jwk' or 'cose'
        :param data: DER bytes, JWK mapping or CBOR bytes
        :param params: import parameters from ``algorithms.params_for_import``
        '''
        if key_format == KEY_FORMAT_SPKI:
            public_key = _load_spki(data)
        elif key_format == KEY_FORMAT_JWK:
            public_key = _load_jwk(data, extractable)
        elif key_format == KEY_FORMAT_COSE:
            public_key = _load_cose(data, cose_algorithm)
        else:
            raise UnsupportedKeyFormatException(
                'Unsupported key format: {}.'.format(key_format))

        _check_key_type(public_key, params)
        logger.debug('Imported %s key (%s).', params['name'], key_format)
        return KeyHandle(params, cose_algorithm, extractable, public_key)

    def verify(self, params, key, signature, message):
        '''Return whether ``signature`` is valid for ``message`` under ``key``.

        ECDSA signatures are expected in the raw r||s form. A signature that
        does not verify is reported as ``False``, never raised.
        '''
        name = params['name']
        if name != key.algorithm_name:
            raise InvalidKeyDataException(
                'Key algorithm {} cannot verify {} signatures.'.format(
                    key.algorithm_name, name))

        signature = bytes(signature)
        message = bytes(message)
        try:
            if name == ALG_NAME_ED25519:
                key.key.verify(signature, message)
            elif name == ALG_NAME_ECDSA:
                size = CURVE_SIZES[key.algorithm['namedCurve']]
                if len(signature) != 2 * size:
                    logger.debug('Raw ECDSA signature has %d bytes, expected %d.',
                                 len(signature), 2 * size)
                    return False
                r = int.from_bytes(signature[:size], 'big')
                s = int.from_bytes(signature[size:], 'big')
                key.key.verify(encode_dss_signature(r, s), message,
                               ECDSA(_hash_for(params['hash'])))
            elif name == ALG_NAME_RSASSA_PKCS1_V1_5:
                key.key.verify(signature, message, PKCS1v15(),
                               _hash_for(key.algorithm['hash']))
            else:
                raise UnsupportedAlgorithmException(
                    'Unknown key algorithm. Got "{}".'.format(name))
        except InvalidSignature:
            return False
        return True

    def export_key(self, key_format, key):
        if not key.extractable:
            raise KeyNotExtractableException('Key is not extractable.')

        public_key = key.key
        if key_format == KEY_FORMAT_SPKI:
            return public_key.public_bytes(Encoding.DER,
                                           PublicFormat.SubjectPublicKeyInfo)
        if key_format != KEY_FORMAT_JWK:
            raise UnsupportedKeyFormatException(
                'Unsupported key format: {}.'.format(key_format))

        jwk = {
            'key_ops': [KEY_USAGE_VERIFY],
            'ext': True,
        }
        if key.cose_algorithm in COSE_ALG_LABELS:
            jwk['alg'] = COSE_ALG_LABELS[key.cose_algorithm]
        if isinstance(public_key, Ed25519PublicKey):
            jwk.update({
                'kty': 'OKP',
                'crv': ALG_NAME_ED25519,
                'x': webauthn_b64_encode(public_key.public_bytes(
                    Encoding.Raw, PublicFormat.Raw)),
            })
        elif isinstance(public_key, EllipticCurvePublicKey):
            numbers = public_key.public_numbers()
            size = CURVE_SIZES[CURVE_P256]
            jwk.update({
                'kty': 'EC',
                'crv': CURVE_P256,
                'x': int_to_b64(numbers.x, size),
                'y': int_to_b64(numbers.y, size),
            })
        else:
            numbers = public_key.public_numbers()
            jwk.update({
                'kty': 'RSA',
                'n': int_to_b64(numbers.n),
                'e': int_to_b64(numbers.e),
            })
        return jwk


default_provider = CryptographyProvider()
