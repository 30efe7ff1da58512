import logging

from .algorithms import is_ecdsa, params_for_verify
from .asn1 import unwrap_signature
from .const import HASH_SHA256
from .provider import default_provider


logger = logging.getLogger(__name__)


class VerificationLog:

    def __init__(self):
        self.debug_log = []

    def add(self, msg):
        if isinstance(msg, str):
            self.debug_log.append(msg)
        elif isinstance(msg, list):
            for m in msg:
                self.debug_log.append(m)

    def get(self):
        return list(self.debug_log)


class AssertionVerifier:
    '''Checks the signature of a WebAuthn assertion.

    Only the signature is checked. Challenge, origin, RP ID hash and flag
    policy are left to the caller, who can read them with
    ``parse_client_data_json`` and ``parse_authenticator_data``.
    '''

    def __init__(self, provider=None):
        self.provider = provider if provider is not None else default_provider
        self.last_log = VerificationLog()

    def get_log(self):
        '''Return the step trail of the most recently finished call.'''
        return self.last_log.get()

    def _step(self, log, msg):
        logger.debug(msg)
        log.add(msg)

    def verify(self, key, authenticator_data, client_data_json, signature):
        '''Return ``True`` if ``signature`` covers
        ``authenticator_data || SHA-256(client_data_json)`` under ``key``.

        :raises MalformedSignatureException: an ECDSA signature is not DER
        :raises InvalidComponentLengthException: ECDSA r or s has a bad width
        :raises UnsupportedAlgorithmException: the key's algorithm is unknown
        '''
        log = VerificationLog()
        try:
            return self._verify(log, key, authenticator_data,
                                client_data_json, signature)
        finally:
            # Each call fills its own trail; only a finished one is published.
            self.last_log = log

    def _verify(self, log, key, authenticator_data, client_data_json, signature):
        # clientDataJSON is hashed as received, never re-serialized.
        self._step(log, '----- [Authentication] Compute ClientData Hash value. -----')
        client_data_hash = self.provider.digest(HASH_SHA256, client_data_json)

        self._step(log, '----- [Authentication] Build signed message. -----')
        signed = bytes(authenticator_data) + bytes(client_data_hash)

        if is_ecdsa(key.algorithm_name):
            self._step(log, '----- [Authentication] Unwrap ASN.1 ECDSA signature. -----')
            normalized_signature = unwrap_signature(signature)
        else:
            normalized_signature = bytes(signature)

        params = params_for_verify(key.algorithm_name)

        self._step(log, '----- [Authentication] Verify Signature ({}). -----'.format(
            params['name']))
        valid = self.provider.verify(params, key, normalized_signature, signed)
        if not valid:
            self._step(log, 'Invalid signature received.')
        return valid
