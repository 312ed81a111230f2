import logging
import os

# Internal logger
_logger = logging.getLogger(__name__)


class CompilerNotFound(Exception):
    def __init__(self, path):
        super(CompilerNotFound, self).__init__(path)
        self.path = path


def expectedCompilerPath(basePath, offset):
    return os.path.join(basePath, offset)


def resolveCompilerPath(basePath, offset):
    """Returns the path of the real compiler, or raises CompilerNotFound."""
    path = expectedCompilerPath(basePath, offset)
    _logger.debug('Looking for the real compiler at %s', path)
    if not os.path.isfile(path):
        raise CompilerNotFound(path)
    return path
