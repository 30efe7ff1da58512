import base64
import binascii
import re


# base64url alphabet, optionally followed by '=' padding.
BASE64URL_RE = re.compile(rb'[A-Za-z0-9_-]*={0,2}')


def webauthn_b64_decode(encoded):
    '''WebAuthn specifies web-safe base64 encoding *without* padding.
    Python implementation requires padding. We'll add it and then
    decode.

    Characters outside the base64url alphabet (including the standard
    alphabet's '+' and '/') raise ``binascii.Error``.
    '''
    if isinstance(encoded, str):
        # Ensure that this is encoded as ascii, not unicode.
        encoded = encoded.encode('ascii')
    if BASE64URL_RE.fullmatch(encoded) is None:
        raise binascii.Error('Non-base64url digit found')
    # Add '=' until length is a multiple of 4 bytes, then decode.
    encoded = encoded.rstrip(b'=')
    padding_len = (-len(encoded) % 4)
    encoded += b'=' * padding_len
    return base64.urlsafe_b64decode(encoded)


def webauthn_b64_encode(raw):
    return base64.urlsafe_b64encode(raw).rstrip(b'=').decode('ascii')


def int_from_b64(encoded):
    return int.from_bytes(webauthn_b64_decode(encoded), 'big')


def int_to_b64(value, length=None):
    if length is None:
        length = max(1, (value.bit_length() + 7) // 8)
    return webauthn_b64_encode(value.to_bytes(length, 'big'))
