"""
The cinterceptor-sanity-checker tool.

The cinterceptor-sanity-checker tool examines the users
environment to see if it makes sense from the
interceptor point of view. Useful first step in trying to
debug a build where the injected arguments never show up.
"""
import sys
import os

from .version import cinterceptor_version, cinterceptor_date
from .logconfig import loggingConfiguration, requestedLevel
from .config import (InterceptorConfig, ConfigurationError, basePathEnv,
                     compilerNameEnv)
from .locator import expectedCompilerPath

explain_MONO_PATH = """

The environment variable 'MONO_PATH' should be set to the mono lib
directory of the Unity installation (Unity sets it itself when it runs
the compiler). The real compiler is expected three directories above it,
in bin/.

"""

explain_CINTERCEPTOR_COMPILER_NAME = """

The real compiler is expected to have been renamed to _mono.exe so that
cinterceptor can take its place. If you renamed it to something else then
set the environment variable CINTERCEPTOR_COMPILER_NAME to that name.

"""


class Checker:
    def __init__(self, environ=None):
        self.environ = os.environ if environ is None else environ

    def check(self):
        """Performs the environmental sanity check.

        Performs the following checks in order:
        0. Prints out the version and logging configuration
        1. Checks that MONO_PATH is set.
        2. Checks that the real compiler is where we expect it.
        3. Reports on the compiler arguments file.
        """

        self.checkSelf()

        self.checkLogging()

        try:
            config = InterceptorConfig.fromEnvironment(self.environ)
        except ConfigurationError as e:
            print(f'{e}.')
            print(explain_MONO_PATH)
            return 1

        success = self.checkCompiler(config)

        self.checkArgsFile(config)

        return 0 if success else 1

    def checkSelf(self):
        print(f'cinterceptor version: {cinterceptor_version}')
        print(f'cinterceptor released: {cinterceptor_date}\n')


    def checkLogging(self):
        (destination, level) = loggingConfiguration(self.environ)
        try:
            requestedLevel(self.environ)
        except ConfigurationError as e:
            print(f'{e}. Falling back to WARNING.')
            level = None
        print(f'Logging output to {destination if destination else "standard error"}.')
        if not level:
            print('Logging level not set, defaulting to WARNING.')
        else:
            print(f'Logging level set to {level}.')


    def checkCompiler(self, config):
        """Checks that the real compiler exists, and is executable."""
        print(f'\n{basePathEnv} is {config.basePath}\n')
        exe = expectedCompilerPath(config.basePath, config.compilerOffset)

        if not os.path.isfile(exe):
            print(f'The real compiler {exe} was not found.\nBetter not try using cinterceptor!\n')
            if not self.environ.get(compilerNameEnv):
                print(explain_CINTERCEPTOR_COMPILER_NAME)
            print(explain_MONO_PATH)
            return False

        if not sys.platform.startswith('win') and not os.access(exe, os.X_OK):
            print(f'The real compiler {exe} is not executable.\n')
            return False

        print(f'The real compiler is:\n\n\t{exe}\n')
        return True


    def checkArgsFile(self, config):
        """Reports whether there is anything to inject."""
        argsPath = os.path.abspath(config.argsPath)
        if os.path.isfile(argsPath):
            print(f'Injecting the arguments in:\n\n\t{argsPath}\n')
            print(f'A copy of each rewritten response file will be left in {os.path.abspath(config.copyPath)}\n\n')
        else:
            print(f'No {config.argsPath} in {os.getcwd()}, nothing will be injected.\n\n')


def main():
    """ The entry point to cinterceptor-sanity-checker.
    """
    return Checker().check()


if __name__ == '__main__':
    sys.exit(main())
