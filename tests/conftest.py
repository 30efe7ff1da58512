import pytest

from webauthn_assertion.util import webauthn_b64_decode


ED25519_SPKI = 'MCowBQYDK2VwAyEAL7milh-tbyuXCwCBtgIxCgZA6HMdV8d6YaBSC_LFxN4'
RS256_SPKI = (
    'MIIBIjANBgkqhkiG9w0BAQEFAAOCAQ8AMIIBCgKCAQEAsxGh7GzeTrMgadrjdvlghyoMUtKXyKkBb23xFul5FCOxKkY4uSKA-TLO7Yh8Fd3RgsJHjDr2TH2kqH1IxbCZds2e9xz2GSUz0EK8SAALVJtjf1M3eicIaFSXSf88lIGms1Zm_cMSrp3PM0SQSwFAXylF3SXgD-Sz7ISqhyMSpmUNEI1Y9NieJDsEHL0efyyzpeis8L1PHYHcCj0sUOntOi3VKVY_AYKMsM0vpXlwYfQbqcQA_nV3MrpjgzIWjarGsODWa2hP5GPovZwbVg2WbARjqoyaP_cQ3StofWMAqIsM7cLny4BIKhNiHqNDGK2qOOiSGs4azU3ISZz7-JoN3wIDAQAB'
)
ES256_SPKI = (
    'MFkwEwYHKoZIzj0CAQYIKoZIzj0DAQcDQgAEAD9X-HUEQqLo6ld7CgpRwRIJkXMWuWfLyVn16N7syL4C_5WPRkE5kXhcU-yy-FGSBJNGUhlPqJueJxGJBtcU7g'
)

ASSERTIONS = {
    -8: {
        'key': ED25519_SPKI,
        'authenticatorData': 'SZYN5YgOjGh0NBcPZHZgW4_krrmihjLHmVzzuoMdl2MFAAAAAg',
        'clientDataJSON': 'eyJ0eXBlIjoid2ViYXV0aG4uZ2V0IiwiY2hhbGxlbmdlIjoidHRuMDh5YUowZnJxZXgtd05jQ0lLdyIsIm9yaWdpbiI6Imh0dHA6Ly9sb2NhbGhvc3Q6NDUwNyIsImNyb3NzT3JpZ2luIjpmYWxzZSwib3RoZXJfa2V5c19jYW5fYmVfYWRkZWRfaGVyZSI6ImRvIG5vdCBjb21wYXJlIGNsaWVudERhdGFKU09OIGFnYWluc3QgYSB0ZW1wbGF0ZS4gU2VlIGh0dHBzOi8vZ29vLmdsL3lhYlBleCJ9',
        'signature': 'dyfN_CoMPijGVyiBy5Udfe6Bc09hvRedjpBdVMr3D2-PVPkt_lmVwHBp6qpMDI_mJcei6niJxyqbMQvQZzwvAg',
    },
    -257: {
        'key': RS256_SPKI,
        'authenticatorData': 'SZYN5YgOjGh0NBcPZHZgW4_krrmihjLHmVzzuoMdl2MFAAAAAg',
        'clientDataJSON': 'eyJ0eXBlIjoid2ViYXV0aG4uZ2V0IiwiY2hhbGxlbmdlIjoiNmRYaTA1R25qMVd5eHdRQ2FpY3FjdyIsIm9yaWdpbiI6Imh0dHA6Ly9sb2NhbGhvc3Q6NDUwNyIsImNyb3NzT3JpZ2luIjpmYWxzZX0',
        'signature': 'QfGF0wqRew83d9gwfWUVV_pGjqbItBD77GVdVzAQkSfT5VklQqt1cYTrOWMjrRFsIilBQ_Yolm4-FjSknTvcb8Su7slB7nVbcasB2LDzg8mVLtRUYJobCL-aEWAp7cq2jxxVgLdIUZHIH-J4F9hwfmdCA7eOO25NxzvsudK-P9uA-QeXeze4mHq2n5Y8bC2OM7JXc9JEAFiQ-sExgdm8tLnZIjykkgBbrOr2eOfVEEI2Nv5C1jaWTJ587Z_enUjFp9TolCJgwcmSwdmV8eku_dQ6hEjE09VPLwoNBp_IIwtevDn9k-22bhMViPOs2mlZ8nWHoMIDeP7BXb-rSuVXRw',
    },
    -7: {
        'key': ES256_SPKI,
        'authenticatorData': 'SZYN5YgOjGh0NBcPZHZgW4_krrmihjLHmVzzuoMdl2MFAAAAAw',
        'clientDataJSON': 'eyJ0eXBlIjoid2ViYXV0aG4uZ2V0IiwiY2hhbGxlbmdlIjoiaHRYWnJ1UVFzSzhjQ0FyLTBJUFBMQSIsIm9yaWdpbiI6Imh0dHA6Ly9sb2NhbGhvc3Q6NDUwNyIsImNyb3NzT3JpZ2luIjpmYWxzZSwib3RoZXJfa2V5c19jYW5fYmVfYWRkZWRfaGVyZSI6ImRvIG5vdCBjb21wYXJlIGNsaWVudERhdGFKU09OIGFnYWluc3QgYSB0ZW1wbGF0ZS4gU2VlIGh0dHBzOi8vZ29vLmdsL3lhYlBleCJ9',
        'signature': 'MEQCIEtcxcn8BRm6BmZE3vghukbX-PcMR8o9WWBJI03RC4B0AiAYnBdiX1RMdUelPaAfqlwF92HqpDEgwfUErp4VoDCqZg',
    },
}

# clientDataJSON from a registration ceremony.
ATTESTATION_CLIENT_DATA = (
    'eyJ0eXBlIjoid2ViYXV0aG4uY3JlYXRlIiwiY2hhbGxlbmdlIjoiZ0RiZjVJQ0l2M2JJTV9jcEdhSHZsdyIsIm9yaWdpbiI6Imh0dHA6Ly9sb2NhbGhvc3Q6NDUwNyIsImNyb3NzT3JpZ2luIjpmYWxzZX0'
)
# clientDataJSON with corrupted bytes in the middle of the origin string.
CORRUPT_CLIENT_DATA = (
    'eyJ0eXBlIjoid2ViYXV0aG4uZ2V0IiwiY2hhbGxlbmdlIjoidHRuMDh5YUowZnJxZXgtd05jQ0lLdyIsIm9yaWdpbiI6Imh0dHA6Ly9sb2NhbGhvc3Q6DNUwNIysmIybN3Nz3TJZp2lujImpYWxzZSwib3RoZXJfa2V5c19jYW5fYmVfYWRkZWRfaGVyZSI6ImRvIG5vdCBjb12YwXJlIGNsaWVudERhdGFKU09OIGFnYWluc3QgYSB0ZW1wbGF0ZS4gU2VlIGh0dHBzOi8vZ29vLmdsL3lhYlBleCJ9'
)
# authenticatorData with attested credential data (Ed25519 COSE key).
ATTESTATION_AUTH_DATA = (
    'SZYN5YgOjGh0NBcPZHZgW4_krrmihjLHmVzzuoMdl2NFAAAAAQECAwQFBgcIAQIDBAUGBwgAIKlBdNw6g4fCpuwlK0FDius666Zu_RCDkd9QzA7RFvcRpAEBAycgBiFYIC-5opYfrW8rlwsAgbYCMQoGQOhzHVfHemGgUgvyxcTe'
)


class Assertion:

    def __init__(self, algorithm, fixture):
        self.algorithm = algorithm
        self.key_data = webauthn_b64_decode(fixture['key'])
        self.authenticator_data = webauthn_b64_decode(fixture['authenticatorData'])
        self.client_data_json = webauthn_b64_decode(fixture['clientDataJSON'])
        self.signature = webauthn_b64_decode(fixture['signature'])


@pytest.fixture(params=sorted(ASSERTIONS), ids=lambda alg: 'alg{}'.format(alg))
def assertion(request):
    return Assertion(request.param, ASSERTIONS[request.param])


@pytest.fixture
def ed25519_assertion():
    return Assertion(-8, ASSERTIONS[-8])


@pytest.fixture
def rs256_assertion():
    return Assertion(-257, ASSERTIONS[-257])


@pytest.fixture
def es256_assertion():
    return Assertion(-7, ASSERTIONS[-7])


def der_integer_sequence(*components):
    body = b''.join(b'\x02' + bytes([len(c)]) + c for c in components)
    return b'\x30' + bytes([len(body)]) + body


@pytest.fixture
def der_sequence():
    return der_integer_sequence
