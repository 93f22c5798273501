import os

from .exceptions import ConfigurationError

TRUE_VALUES = ('1', 'true', 'yes', 'on')
FALSE_VALUES = ('0', 'false', 'no', 'off', '')


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-key')
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///rescuedge.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    APP_ENV = os.environ.get('APP_ENV', 'development')
    # None means "seed unless running in production"
    SEED_HOSPITALS = os.environ.get('SEED_HOSPITALS')

    SERVER_HOST = os.environ.get('SERVER_HOST', '127.0.0.1')
    SERVER_PORT = os.environ.get('SERVER_PORT', '8080')
    DEBUG = os.environ.get('FLASK_DEBUG', 'false')

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    API_VERSION = '1.0'


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    APP_ENV = 'test'
    SEED_HOSPITALS = 'true'
    LOG_LEVEL = 'WARNING'


def property_key(name):
    """Map a command-line property name such as ``server.port`` to ``SERVER_PORT``."""
    return name.strip().replace('.', '_').replace('-', '_').upper()


def parse_command_line_args(args):
    """Split launch arguments into config properties and positional arguments.

    ``--name=value`` becomes a property, ``--flag`` becomes ``"true"`` and a
    bare ``--`` stops option parsing. Everything else is positional.
    """
    properties = {}
    positional = []
    options_done = False
    for arg in args or ():
        if options_done:
            positional.append(arg)
        elif arg == '--':
            options_done = True
        elif arg.startswith('--') and not arg.startswith('--='):
            name, sep, value = arg[2:].partition('=')
            properties[property_key(name)] = value if sep else 'true'
        else:
            positional.append(arg)
    return properties, positional


def as_bool(value, key='value'):
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise ConfigurationError(f'{key} must be a boolean, got {value!r}', {'key': key})


def as_int(value, key='value'):
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f'{key} must be an integer, got {value!r}', {'key': key}) from None
