import logging
import struct
from collections import namedtuple

from .const import (
    ATTESTATION_DATA_INCLUDED,
    BACKUP_ELIGIBLE,
    BACKUP_STATE,
    EXTENSION_DATA_INCLUDED,
    FLAGS_OFFSET,
    RP_ID_HASH_LENGTH,
    SIGN_COUNT_END,
    SIGN_COUNT_OFFSET,
    USER_PRESENT,
    USER_VERIFIED,
)
from .exceptions import OutOfRangeException


logger = logging.getLogger(__name__)


AuthenticatorFlags = namedtuple(
    'AuthenticatorFlags',
    ['userPresence', 'userVerification', 'backupEligibility', 'backupState'])


def _require(auth_data, length, what):
    if len(auth_data) < length:
        logger.debug('Authenticator data too short for %s: %d bytes.',
                     what, len(auth_data))
        raise OutOfRangeException(
            'Authenticator data has {} bytes; {} needs at least {}.'.format(
                len(auth_data), what, length))


def _flags_byte(auth_data):
    auth_data = memoryview(auth_data).cast('B')
    _require(auth_data, FLAGS_OFFSET + 1, 'the flags byte')
    return auth_data[FLAGS_OFFSET]


def parse_flags(auth_data):
    '''Decode the UP, UV, BE and BS bits of the flags byte (offset 32).

    Other bits are ignored; see ``has_attested_credential_data`` and
    ``has_extension_data`` for AT and ED.
    '''
    flags = _flags_byte(auth_data)
    return AuthenticatorFlags(
        userPresence=(flags & USER_PRESENT) != 0,
        userVerification=(flags & USER_VERIFIED) != 0,
        backupEligibility=(flags & BACKUP_ELIGIBLE) != 0,
        backupState=(flags & BACKUP_STATE) != 0,
    )


def has_attested_credential_data(auth_data):
    return (_flags_byte(auth_data) & ATTESTATION_DATA_INCLUDED) != 0


def has_extension_data(auth_data):
    return (_flags_byte(auth_data) & EXTENSION_DATA_INCLUDED) != 0


def get_rp_id_hash(auth_data):
    auth_data = bytes(auth_data)
    _require(auth_data, RP_ID_HASH_LENGTH, 'the RP ID hash')
    return auth_data[:RP_ID_HASH_LENGTH]


def get_sign_count(auth_data):
    auth_data = bytes(auth_data)
    _require(auth_data, SIGN_COUNT_END, 'the signature counter')
    return struct.unpack('!I', auth_data[SIGN_COUNT_OFFSET:SIGN_COUNT_END])[0]
