import logging
import os


LOG_LEVELS = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG')
TRUE_VALUES = ('1', 'true', 'yes', 'on')


class Settings:

    def __init__(self, log_level='WARNING', key_extractable=False):
        self.log_level = log_level
        self.key_extractable = key_extractable

    @classmethod
    def from_env(cls, environ=None):
        environ = os.environ if environ is None else environ

        log_level = environ.get('WEBAUTHN_LOG_LEVEL', 'WARNING').upper()
        if log_level not in LOG_LEVELS:
            log_level = 'WARNING'
        key_extractable = environ.get(
            'WEBAUTHN_KEY_EXTRACTABLE', 'false').lower() in TRUE_VALUES

        return cls(log_level=log_level, key_extractable=key_extractable)

    def __repr__(self):
        return '<Settings log_level={} key_extractable={}>'.format(
            self.log_level, self.key_extractable)


settings = Settings.from_env()


def configure_logging(level=None):
    '''Apply the configured level to the package loggers.

    Handlers are left to the application, except that ``basicConfig`` is
    called so that a bare script still sees the messages.
    '''
    level = level or settings.log_level
    logging.basicConfig(level=level)
    logging.getLogger('webauthn_assertion').setLevel(level)
    return level
