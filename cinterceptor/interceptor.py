#!/usr/bin/env python
"""This is a wrapper around the real Mono compiler.

Unity invokes it as

    cinterceptor <compiler path> @<response file>

If there is a compiler_args.txt in the working directory its contents
are appended to the response file first, which is how per-project
defines and 'treat warnings as errors' get into a Unity build.  Then the
real compiler is run with the same two arguments and its exit code is
handed back to Unity.
"""

import logging
import sys

from .config import InterceptorConfig, ConfigurationError
from .locator import resolveCompilerPath, CompilerNotFound
from .argfile import ResponseFileRef, RewriteOutcome, rewriteResponseFile
from .runner import runCompiler
from .messages import writeWarning, writeError
from .logconfig import logConfig

# Internal logger
_logger = logging.getLogger(__name__)


def intercept(args, config=None):
    """ The workhorse. Returns the exit code for the process.
    """
    # args[0] = compiler path, args[1] = response file reference
    if len(args) != 2:
        writeError('Invalid arguments!')
        return 1

    if config is None:
        try:
            config = InterceptorConfig.fromEnvironment()
        except ConfigurationError as e:
            writeError(str(e))
            return 1
    _logger.debug('Using %s', config)

    try:
        compilerExe = resolveCompilerPath(config.basePath, config.compilerOffset)
    except CompilerNotFound as e:
        writeError('Failed to find the Mono compiler ({0}).'.format(e.path))
        return 1

    ref = ResponseFileRef(args[1], config.marker)
    (outcome, reason) = rewriteResponseFile(ref, config.argsPath, config.copyPath)
    _logger.info('Rewrite of %s: %s (%s)', ref.path, RewriteOutcome.getOutcomeString(outcome), reason)
    if outcome == RewriteOutcome.SKIPPED:
        writeWarning('No compiler arguments file found. Continuing anyway...')
    elif outcome == RewriteOutcome.FAILED:
        writeWarning('Failed to inject compiler arguments ({0}). Continuing anyway...'.format(reason))

    return runCompiler(compilerExe, args[0], ref.original)


def main():
    rc = 1
    legible_argstring = ' '.join(list(sys.argv)[1:])
    try:
        logConfig('cinterceptor')
    except (ConfigurationError, OSError) as e:
        writeError(str(e))
        return rc
    _logger.info('Entering interceptor [%s]', legible_argstring)
    try:
        rc = intercept(list(sys.argv)[1:])
    except Exception as e:
        writeError('Unexpected failure: {0}'.format(e))
        _logger.debug('interceptor: exception case', exc_info=True)
    _logger.debug('Calling %s returned %d', list(sys.argv), rc)
    return rc


if __name__ == '__main__':
    sys.exit(main())
