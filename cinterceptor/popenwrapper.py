import os
import subprocess
import logging

# Thin wrapper around subprocess.Popen so that every command we hand
# over to is visible at DEBUG level.

# Internal logger
_logger = logging.getLogger(__name__)

def Popen(cmd, **kwargs):
    _logger.debug('Interceptor executing: %s in: %s', cmd, os.getcwd())
    try:
        return subprocess.Popen(cmd, **kwargs)
    except (OSError, ValueError) as e:
        _logger.error('Interceptor failed to execute %s: %s', cmd, e)
        raise
