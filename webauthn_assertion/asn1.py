'''Conversion of DER encoded ECDSA signatures into the raw r||s form.

Authenticators emit ECDSA signatures as an ASN.1 ``SEQUENCE`` of two
``INTEGER`` values. The provider's verify primitive takes the fixed-width
concatenation of both components instead.

Only DER short-form lengths (up to 127 content bytes) are understood, which
covers P-256 signatures. Longer encodings are rejected, never guessed at.

The component width rule assumes r and s are a multiple of 128 bits long.
That holds for P-256 (32 bytes) and P-384 (48 bytes) but not for curves
such as P-521 (66 bytes); those are reported as
``InvalidComponentLengthException``.
'''
import logging

from .const import (
    ASN1_SHORT_FORM_MAX,
    ASN1_TAG_INTEGER,
    ASN1_TAG_SEQUENCE,
    ECDSA_COMPONENT_ALIGNMENT,
)
from .exceptions import (
    InvalidComponentLengthException,
    MalformedSignatureException,
)


logger = logging.getLogger(__name__)


def read_integer_sequence(data):
    '''Return the content bytes of every INTEGER in a DER SEQUENCE.'''
    data = bytes(data)
    if len(data) < 2 or data[0] != ASN1_TAG_SEQUENCE:
        raise MalformedSignatureException('Input is not an ASN.1 sequence.')

    seq_length = data[1]
    if seq_length > ASN1_SHORT_FORM_MAX:
        raise MalformedSignatureException(
            'ASN.1 long form lengths are not supported.')
    if 2 + seq_length > len(data):
        raise MalformedSignatureException(
            'ASN.1 sequence length exceeds the input.')

    elements = []
    current = data[2:2 + seq_length]
    while current:
        if current[0] != ASN1_TAG_INTEGER:
            raise MalformedSignatureException(
                'Expected ASN.1 sequence element to be an INTEGER.')
        if len(current) < 2:
            raise MalformedSignatureException('Truncated ASN.1 INTEGER.')

        el_length = current[1]
        if el_length > ASN1_SHORT_FORM_MAX or 2 + el_length > len(current):
            raise MalformedSignatureException('Invalid ASN.1 INTEGER length.')
        elements.append(current[2:2 + el_length])
        current = current[2 + el_length:]

    return elements


def _normalize_component(component, label):
    # A leading 0 on a length of 16n+1 is the two's complement sign byte.
    if len(component) % ECDSA_COMPONENT_ALIGNMENT == 1 and component[0] == 0:
        component = component[1:]
    # A length of 16n-1 lost a leading 0 byte; restore it.
    if len(component) % ECDSA_COMPONENT_ALIGNMENT == ECDSA_COMPONENT_ALIGNMENT - 1:
        component = b'\x00' + component

    if len(component) % ECDSA_COMPONENT_ALIGNMENT != 0:
        logger.debug('Unexpected ECDSA %s length: %d', label, len(component))
        raise InvalidComponentLengthException(
            'Unknown ECDSA sig {} length error ({} bytes).'.format(
                label, len(component)))
    return component


def unwrap_signature(signature):
    '''Decode a DER ECDSA signature into the raw r||s concatenation.

    :param signature: bytes-like DER ``SEQUENCE { INTEGER r, INTEGER s }``
    :raises MalformedSignatureException: the input is not such a sequence
    :raises InvalidComponentLengthException: r or s has an unexpected width
    '''
    elements = read_integer_sequence(signature)
    if len(elements) != 2:
        raise MalformedSignatureException(
            'Expected 2 ASN.1 sequence elements, got {}.'.format(len(elements)))

    r, s = elements
    r = _normalize_component(r, 'r')
    s = _normalize_component(s, 's')
    return r + s
