import logging

from .popenwrapper import Popen
from .messages import writeError

# Internal logger
_logger = logging.getLogger(__name__)

# Returned when the compiler could not even be started.
FAILURE_EXIT_CODE = 1


def runCompiler(compilerExe, arg0, arg1):
    """Runs the real compiler and returns its exit code.

    The child shares our stdout and stderr, and we wait for it for as
    long as it takes.
    """
    cmd = [compilerExe, arg0, arg1]
    try:
        proc = Popen(cmd)
    except (OSError, ValueError) as e:
        writeError('Failed to compile!: {0}'.format(e))
        return FAILURE_EXIT_CODE
    rc = proc.wait()
    _logger.debug('runCompiler rc = %d', rc)
    return rc
