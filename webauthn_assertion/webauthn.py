'''Public entry points for checking WebAuthn assertions.

Typical use::

    key = import_key(-7, spki_bytes)
    if not verify_signature(key, authenticator_data, client_data_json, signature):
        ...  # reject
    flags = parse_authenticator_data(authenticator_data)
    challenge = get_challenge(client_data_json)

Policy (expected challenge, origin, user verification) is the caller's.
'''
import logging

from . import authenticator_data as _authenticator_data
from . import client_data as _client_data
from .algorithms import params_for_import
from .config import settings
from .const import KEY_FORMAT_SPKI
from .keys import as_key_material
from .provider import default_provider
from .verifier import AssertionVerifier


logger = logging.getLogger(__name__)


def import_key(algorithm, data, extractable=None, provider=None):
    '''Import a credential public key for verification.

    :param algorithm: COSE algorithm identifier (-8, -7 or -257)
    :param data: ``Spki``, ``Jwk`` or ``CoseKey``; plain bytes are read as
                 SPKI and a mapping with a ``kty`` member as JWK
    :param extractable: allow ``export_key``; defaults to
                        ``WEBAUTHN_KEY_EXTRACTABLE``
    :raises UnsupportedAlgorithmException: unknown ``algorithm``
    :raises InvalidKeyDataException: undecodable or mismatching key data
    '''
    provider = provider if provider is not None else default_provider
    if extractable is None:
        extractable = settings.key_extractable

    params = params_for_import(algorithm)
    material = as_key_material(data)
    logger.debug('Importing %s key for COSE algorithm %s.', material.format, algorithm)
    return provider.import_key(material.format, material.data, params,
                               extractable=extractable,
                               cose_algorithm=algorithm)


def export_key(key, key_format=KEY_FORMAT_SPKI, provider=None):
    provider = provider if provider is not None else default_provider
    return provider.export_key(key_format, key)


def get_challenge(client_data_json):
    return _client_data.extract_challenge(client_data_json)


def parse_client_data_json(data):
    return _client_data.decode(data)


def parse_authenticator_data(authenticator_data):
    return _authenticator_data.parse_flags(authenticator_data)


def verify_signature(key, authenticator_data, client_data_json, signature,
                     provider=None):
    '''Return whether ``signature`` is a valid assertion signature.

    A signature that does not match is ``False``. Signatures that are not
    even shaped like one (malformed ECDSA DER) raise instead.
    '''
    verifier = AssertionVerifier(provider)
    return verifier.verify(key, authenticator_data, client_data_json, signature)
