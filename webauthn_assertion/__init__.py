from .authenticator_data import (
    AuthenticatorFlags,
    get_rp_id_hash,
    get_sign_count,
    has_attested_credential_data,
    has_extension_data,
)
from .client_data import ClientData
from .config import configure_logging, settings
from .exceptions import (
    ClientDataException,
    InvalidComponentLengthException,
    InvalidJSONException,
    InvalidKeyDataException,
    KeyException,
    KeyNotExtractableException,
    MalformedChallengeException,
    MalformedSignatureException,
    MissingFieldException,
    OutOfRangeException,
    SignatureException,
    UnsupportedAlgorithmException,
    UnsupportedKeyFormatException,
    WebAuthnException,
)
from .keys import CoseKey, Jwk, KeyHandle, Spki
from .provider import CryptographyProvider
from .verifier import AssertionVerifier
from .webauthn import (
    export_key,
    get_challenge,
    import_key,
    parse_authenticator_data,
    parse_client_data_json,
    verify_signature,
)

__version__ = '0.1'
