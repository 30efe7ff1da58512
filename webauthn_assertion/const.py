#
# Constants shared by the assertion verification modules.
#

# REF: https://www.iana.org/assignments/cose/cose.xhtml
# COSE Algorithms
COSE_ALG_EDDSA = -8    # EdDSA (Ed25519)
COSE_ALG_ES256 = -7    # ECDSA w/ SHA-256  a.k.a. ES256
COSE_ALG_RS256 = -257  # RSASSA-PKCS1-v1_5 w/ SHA-256  a.k.a. RS256
# COSE Algorithms Label
COSE_ALGLABEL_EDDSA = 'EdDSA'
COSE_ALGLABEL_ES256 = 'ES256'
COSE_ALGLABEL_RS256 = 'RS256'
# COSE Key Name
COSE_KEYNAME_KTY = 1
COSE_KEYNAME_ALG = 3
# COSE Key Types
COSE_KTY_OKP = 1
COSE_KTY_EC2 = 2
COSE_KTY_RSA = 3
# COSE Key Parameters
COSE_KEYPARAM_CRV = -1    # OKP, EC2
COSE_KEYPARAM_X = -2      # OKP, EC2
COSE_KEYPARAM_Y = -3      # EC2
COSE_KEYPARAM_RSA_N = -1
COSE_KEYPARAM_RSA_E = -2
# COSE Elliptic Curves
COSE_CRV_P256 = 1
COSE_CRV_ED25519 = 6

# WebCrypto algorithm names.
ALG_NAME_ED25519 = 'Ed25519'
ALG_NAME_ECDSA = 'ECDSA'
ALG_NAME_RSASSA_PKCS1_V1_5 = 'RSASSA-PKCS1-v1_5'
CURVE_P256 = 'P-256'
HASH_SHA256 = 'SHA-256'

# Key formats.
KEY_FORMAT_SPKI = 'spki'
KEY_FORMAT_JWK = 'jwk'
KEY_FORMAT_COSE = 'cose'
KEY_USAGE_VERIFY = 'verify'

# Authenticator data layout.
# https://www.w3.org/TR/webauthn/#authenticator-data
RP_ID_HASH_LENGTH = 32
FLAGS_OFFSET = 32
SIGN_COUNT_OFFSET = 33
SIGN_COUNT_END = 37
# Authenticator data flags.
USER_PRESENT = 1 << 0
USER_VERIFIED = 1 << 2
BACKUP_ELIGIBLE = 1 << 3
BACKUP_STATE = 1 << 4
ATTESTATION_DATA_INCLUDED = 1 << 6
EXTENSION_DATA_INCLUDED = 1 << 7

# ASN.1 DER tags.
ASN1_TAG_SEQUENCE = 0x30
ASN1_TAG_INTEGER = 0x02
# Largest content length expressible in DER short form.
ASN1_SHORT_FORM_MAX = 0x7f
# r and s lengths are assumed to be a multiple of 128 bits.
ECDSA_COMPONENT_ALIGNMENT = 16
