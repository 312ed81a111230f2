"""
  Logging setup for the cinterceptor tools.

  The internal log is separate from the scraper-facing lines written by
  messages; it is off (WARNING) unless CINTERCEPTOR_OUTPUT_LEVEL asks for
  more, and goes to CINTERCEPTOR_OUTPUT_FILE instead of standard error when
  that is set, so Unity's console stays clean.
"""
import logging
import os

from .config import ConfigurationError

_loggingEnvLevel = 'CINTERCEPTOR_OUTPUT_LEVEL'

_loggingDestination = 'CINTERCEPTOR_OUTPUT_FILE'

_validLogLevels = ['ERROR', 'WARNING', 'INFO', 'DEBUG']

_defaultFormat = '%(levelname)s:%(message)s'
_debugFormat = '%(levelname)s::%(module)s.%(funcName)s() at %(filename)s:%(lineno)d ::%(message)s'


def requestedLevel(environ=None):
    """Returns the level name asked for in the environment, or None.

    Raises ConfigurationError for anything that is not a level we know.
    """
    if environ is None:
        environ = os.environ
    level = environ.get(_loggingEnvLevel)
    if not level:
        return None
    level = level.upper()
    if level not in _validLogLevels:
        raise ConfigurationError('"{0}" is not a valid value for {1}. Valid values are {2}'.format(
            level, _loggingEnvLevel, ', '.join(_validLogLevels)))
    return level


def logConfig(name, environ=None):
    """Configures the root logger and returns the logger for name."""
    if environ is None:
        environ = os.environ

    level = requestedLevel(environ)
    destination = environ.get(_loggingDestination)

    fmt = _debugFormat if level == 'DEBUG' else _defaultFormat
    if destination:
        logging.basicConfig(filename=destination, level=logging.WARNING, format=fmt)
    else:
        logging.basicConfig(level=logging.WARNING, format=fmt)

    retval = logging.getLogger(name)
    if level:
        retval.setLevel(getattr(logging, level))
    return retval


def loggingConfiguration(environ=None):
    if environ is None:
        environ = os.environ
    return (environ.get(_loggingDestination), environ.get(_loggingEnvLevel))
