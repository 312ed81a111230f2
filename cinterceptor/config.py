"""Configuration for the interceptor.

The environment is consulted exactly once, by
InterceptorConfig.fromEnvironment(), when a tool starts up.  Everything
downstream receives plain values.
"""
import os

# Environmental variable holding the mono lib directory Unity hands us.
basePathEnv = 'MONO_PATH'

# Environmental variable for the name of the real compiler (if it was renamed
# to something other than _mono.exe).
compilerNameEnv = 'CINTERCEPTOR_COMPILER_NAME'

defaultCompilerName = '_mono.exe'

# Where the real compiler lives relative to MONO_PATH.
compilerOffsetDirs = ('..', '..', '..', 'bin')

# Both live in the working directory of the build.
defaultArgsPath = 'compiler_args.txt'
defaultCopyPath = 'copy.txt'

# Prefix telling the compiler to read its options from a file.
defaultMarker = '@'


class ConfigurationError(Exception):
    pass


def compilerOffset(compilerName=None):
    parts = compilerOffsetDirs + (compilerName or defaultCompilerName,)
    return os.path.join(*parts)


defaultCompilerOffset = compilerOffset()


class InterceptorConfig(object):
    def __init__(self, basePath, compilerOffset=defaultCompilerOffset,
                 argsPath=defaultArgsPath, copyPath=defaultCopyPath,
                 marker=defaultMarker):
        self.basePath = basePath
        self.compilerOffset = compilerOffset
        self.argsPath = argsPath
        self.copyPath = copyPath
        self.marker = marker

    @classmethod
    def fromEnvironment(cls, environ=None):
        """Builds the configuration from the process environment.

        Raises ConfigurationError when MONO_PATH is missing, since
        there is then nowhere to look for the real compiler.
        """
        if environ is None:
            environ = os.environ
        basePath = environ.get(basePathEnv)
        if not basePath:
            raise ConfigurationError('{0} is not set, unable to locate the Mono compiler'.format(basePathEnv))
        return cls(basePath, compilerOffset(environ.get(compilerNameEnv)))

    def __repr__(self):
        return 'InterceptorConfig({0})'.format(self.__dict__)
