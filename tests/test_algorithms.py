import pytest

from webauthn_assertion.algorithms import (
    is_ecdsa,
    params_for_import,
    params_for_verify,
)
from webauthn_assertion.exceptions import UnsupportedAlgorithmException


class TestParamsForImport:

    def test_ed25519(self):
        assert dict(params_for_import(-8)) == {'name': 'Ed25519'}

    def test_es256(self):
        assert dict(params_for_import(-7)) == {'name': 'ECDSA', 'namedCurve': 'P-256'}

    def test_rs256(self):
        assert dict(params_for_import(-257)) == {
            'name': 'RSASSA-PKCS1-v1_5', 'hash': 'SHA-256'}

    @pytest.mark.parametrize('identifier', [-35, -36, -37, -258, 0, 7, True, '-7', None])
    def test_unsupported(self, identifier):
        with pytest.raises(UnsupportedAlgorithmException):
            params_for_import(identifier)

    def test_tables_are_read_only(self):
        params = params_for_import(-7)
        with pytest.raises(TypeError):
            params['namedCurve'] = 'P-384'


class TestParamsForVerify:

    def test_ecdsa_carries_hash(self):
        assert dict(params_for_verify('ECDSA')) == {'name': 'ECDSA', 'hash': 'SHA-256'}

    def test_rsa_and_ed25519(self):
        assert dict(params_for_verify('RSASSA-PKCS1-v1_5')) == {'name': 'RSASSA-PKCS1-v1_5'}
        assert dict(params_for_verify('Ed25519')) == {'name': 'Ed25519'}

    @pytest.mark.parametrize('name', ['ECDH', 'RSA-PSS', 'ecdsa', ''])
    def test_unsupported(self, name):
        with pytest.raises(UnsupportedAlgorithmException):
            params_for_verify(name)


def test_is_ecdsa():
    assert is_ecdsa('ECDSA')
    assert not is_ecdsa('Ed25519')
