class WebAuthnException(Exception):
    pass


class KeyException(WebAuthnException):
    pass

class UnsupportedAlgorithmException(KeyException):
    pass

class InvalidKeyDataException(KeyException):
    pass

class KeyNotExtractableException(KeyException):
    pass

class UnsupportedKeyFormatException(KeyException):
    pass


class SignatureException(WebAuthnException):
    pass

class MalformedSignatureException(SignatureException):
    pass

class InvalidComponentLengthException(SignatureException):
    pass


class OutOfRangeException(WebAuthnException, IndexError):
    pass


class ClientDataException(WebAuthnException):
    pass

class InvalidJSONException(ClientDataException, ValueError):
    '''Raised when clientDataJSON is not UTF-8 encoded JSON text.

    Carries the parser's position details when they are known, so that
    ``str(e)`` reads like the underlying ``json.JSONDecodeError``.
    '''

    def __init__(self, msg, pos=None, lineno=None, colno=None):
        if lineno is not None:
            message = '{}: line {} column {} (char {})'.format(
                msg, lineno, colno, pos)
        elif pos is not None:
            message = '{} (position {})'.format(msg, pos)
        else:
            message = msg
        super().__init__(message)
        self.msg = msg
        self.pos = pos
        self.lineno = lineno
        self.colno = colno

class MissingFieldException(ClientDataException):

    def __init__(self, field):
        super().__init__(
            'Client data is missing the "{}" member.'.format(field))
        self.field = field

class MalformedChallengeException(ClientDataException):
    pass
