'''Lookup tables from algorithm identifiers to verification parameters.

Importing a key needs the algorithm family (and curve), keyed by the COSE
identifier the credential was registered with. Verifying needs the hash
parameters, keyed by the algorithm name attached to the imported key.
Both tables are read-only for the life of the process.
'''
import logging
from types import MappingProxyType

from .const import (
    ALG_NAME_ECDSA,
    ALG_NAME_ED25519,
    ALG_NAME_RSASSA_PKCS1_V1_5,
    COSE_ALG_EDDSA,
    COSE_ALG_ES256,
    COSE_ALG_RS256,
    COSE_ALGLABEL_EDDSA,
    COSE_ALGLABEL_ES256,
    COSE_ALGLABEL_RS256,
    CURVE_P256,
    HASH_SHA256,
)
from .exceptions import UnsupportedAlgorithmException


logger = logging.getLogger(__name__)


def _frozen(**params):
    return MappingProxyType(dict(params))


IMPORT_PARAMS_BY_COSE = MappingProxyType({
    COSE_ALG_EDDSA: _frozen(name=ALG_NAME_ED25519),
    COSE_ALG_ES256: _frozen(name=ALG_NAME_ECDSA, namedCurve=CURVE_P256),
    COSE_ALG_RS256: _frozen(name=ALG_NAME_RSASSA_PKCS1_V1_5, hash=HASH_SHA256),
})

VERIFY_PARAMS_BY_NAME = MappingProxyType({
    ALG_NAME_ED25519: _frozen(name=ALG_NAME_ED25519),
    ALG_NAME_ECDSA: _frozen(name=ALG_NAME_ECDSA, hash=HASH_SHA256),
    ALG_NAME_RSASSA_PKCS1_V1_5: _frozen(name=ALG_NAME_RSASSA_PKCS1_V1_5),
})

COSE_ALG_LABELS = MappingProxyType({
    COSE_ALG_EDDSA: COSE_ALGLABEL_EDDSA,
    COSE_ALG_ES256: COSE_ALGLABEL_ES256,
    COSE_ALG_RS256: COSE_ALGLABEL_RS256,
})


def params_for_import(identifier):
    '''Return the import parameters for a COSE algorithm identifier.

    :param identifier: signed integer COSE code, e.g. -7 for ES256
    :raises UnsupportedAlgorithmException: for any other identifier
    '''
    # bool is an int subclass; True must not alias a COSE code.
    if (not isinstance(identifier, int) or isinstance(identifier, bool)
            or identifier not in IMPORT_PARAMS_BY_COSE):
        logger.debug('Unknown key algorithm (COSE): %r', identifier)
        raise UnsupportedAlgorithmException(
            'Unknown key algorithm (COSE). Got {}.'.format(identifier))
    return IMPORT_PARAMS_BY_COSE[identifier]


def params_for_verify(key_algorithm_name):
    '''Return the verify parameters for the algorithm name of an imported key.'''
    found = VERIFY_PARAMS_BY_NAME.get(key_algorithm_name)
    if found is None:
        logger.debug('Unknown key algorithm: %r', key_algorithm_name)
        raise UnsupportedAlgorithmException(
            'Unknown key algorithm. Got "{}".'.format(key_algorithm_name))
    return found


def is_ecdsa(key_algorithm_name):
    return key_algorithm_name == ALG_NAME_ECDSA
