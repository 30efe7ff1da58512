import binascii
import json
import logging

from .exceptions import (
    InvalidJSONException,
    MalformedChallengeException,
    MissingFieldException,
)
from .util import webauthn_b64_decode


logger = logging.getLogger(__name__)


class ClientData:
    '''Parsed clientDataJSON.

    The well-known members are exposed as attributes; the complete parsed
    object, including members this class knows nothing about, stays
    available as ``raw``.
    '''

    def __init__(self, raw):
        self.raw = raw

    @property
    def type(self):
        return self.raw.get('type')

    @property
    def challenge(self):
        return self.raw.get('challenge')

    @property
    def origin(self):
        return self.raw.get('origin')

    @property
    def cross_origin(self):
        return self.raw.get('crossOrigin')

    def __getitem__(self, name):
        return self.raw[name]

    def __contains__(self, name):
        return name in self.raw

    def get(self, name, default=None):
        return self.raw.get(name, default)

    def __eq__(self, other):
        if isinstance(other, ClientData):
            return self.raw == other.raw
        if isinstance(other, dict):
            return self.raw == other
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return 'ClientData({!r})'.format(self.raw)


def _reject_constant(name):
    # json accepts NaN, Infinity and -Infinity, which are not JSON.
    raise InvalidJSONException('Unexpected token {}, not valid JSON'.format(name))


def decode(client_data_json):
    '''UTF-8 decode ``client_data_json`` and parse it as a JSON object.

    :raises InvalidJSONException: on undecodable text or malformed JSON
    '''
    try:
        # A leading byte order mark is dropped, as browsers' TextDecoder does.
        text = bytes(client_data_json).decode('utf-8-sig')
    except UnicodeDecodeError as e:
        logger.debug('Client data is not UTF-8: %s', e)
        raise InvalidJSONException(
            'Client data is not valid UTF-8: {}'.format(e.reason),
            pos=e.start) from e

    try:
        parsed = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        logger.debug('Client data is not JSON: %s', e)
        raise InvalidJSONException(
            e.msg, pos=e.pos, lineno=e.lineno, colno=e.colno) from e

    if not isinstance(parsed, dict):
        raise InvalidJSONException(
            'Client data must be a JSON object, got {}.'.format(
                type(parsed).__name__))
    return ClientData(parsed)


def extract_challenge(client_data_json):
    '''Return the raw bytes of the base64url ``challenge`` member.'''
    client_data = decode(client_data_json)
    challenge = client_data.challenge
    if challenge is None:
        raise MissingFieldException('challenge')
    if not isinstance(challenge, str):
        raise MalformedChallengeException('Challenge must be a string.')

    try:
        return webauthn_b64_decode(challenge)
    except (binascii.Error, UnicodeEncodeError) as e:
        logger.debug('Challenge is not base64url: %s', e)
        raise MalformedChallengeException(
            'Challenge is not valid base64url: {}'.format(e)) from e
