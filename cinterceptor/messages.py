"""The two message emitters the build tool scrapes.

Unity (and anything else sharing its log scraper) only picks up lines
matching

  \\s*(?<filename>.*)\\((?<line>\\d+),(?<column>\\d+)\\):\\s*(?<type>warning|error)\\s*(?<id>[^:]*):\\s*(?<message>.*)

so the layout below must not change.
"""

import sys

TAG = 'Compile Interceptor'

WARNING = 'warning'
ERROR = 'error'


def formatMessage(severity, text):
    return '[{0}](0,0): {1}: {2}'.format(TAG, severity, text)


def _emit(line):
    sys.stderr.write(line)
    sys.stderr.flush()


def writeWarning(text):
    _emit(formatMessage(WARNING, text) + '\n')


def writeError(text):
    _emit(formatMessage(ERROR, text) + '\n')
