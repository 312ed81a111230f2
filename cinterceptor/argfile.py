"""
Response file handling.

The build tool passes the compiler "@some/dir/args.rsp", meaning "read
your options from some/dir/args.rsp".  Before the real compiler gets to
read that file we append the contents of compiler_args.txt to it, which
is how per-project defines and warning flags get into a Unity build.

The string with the marker is what the compiler must see, the string
without it is what we do I/O on.  ResponseFileRef keeps the two apart.
"""
import logging
import os
from shutil import copyfile

# Internal logger
_logger = logging.getLogger(__name__)


class RewriteOutcome(object):
    REWRITTEN = 1
    SKIPPED = 2
    FAILED = 3

    outcomeStrings = {
        REWRITTEN: 'REWRITTEN',
        SKIPPED: 'SKIPPED',
        FAILED: 'FAILED',
    }

    @classmethod
    def getOutcomeString(cls, outcome):
        return cls.outcomeStrings.get(outcome, 'UNKNOWN')


def stripMarker(ref, marker='@'):
    """Returns (hadMarker, path) for a response file reference.

    Only a single leading marker is removed.
    """
    if marker and ref.startswith(marker):
        return (True, ref[len(marker):])
    return (False, ref)


class ResponseFileRef(object):
    def __init__(self, original, marker='@'):
        self.original = original
        (self.hadMarker, self.path) = stripMarker(original, marker)

    def __repr__(self):
        return 'ResponseFileRef({0!r} -> {1!r})'.format(self.original, self.path)


def _readBytes(path):
    with open(path, 'rb') as f:
        return f.read()


def rewriteResponseFile(ref, argsPath, copyPath):
    """Appends the extras file to the response file referenced by ref.

    Returns (outcome, reason). Nothing is raised, the caller decides what
    to report.

    The steps are: read the response file, delete it, write it back,
    append the extras, then snapshot the result to copyPath.  The file is
    deleted and recreated, never truncated in place.

    Running this twice against the same response file appends the extras
    twice.
    """
    if not os.path.isfile(argsPath):
        return (RewriteOutcome.SKIPPED, 'no compiler arguments file {0}'.format(argsPath))

    path = ref.path
    try:
        content = _readBytes(path)
        _logger.debug('Read %d bytes from %s', len(content), path)

        os.remove(path)
        with open(path, 'wb') as f:
            f.write(content)

        extras = _readBytes(argsPath)
        with open(path, 'ab') as f:
            f.write(extras)
        _logger.debug('Appended %d bytes from %s to %s', len(extras), argsPath, path)

        copyfile(path, copyPath)
    except (OSError, ValueError) as e:
        _logger.debug('Rewriting %s failed', path, exc_info=True)
        return (RewriteOutcome.FAILED, str(e))

    return (RewriteOutcome.REWRITTEN, '{0} appended to {1}'.format(argsPath, path))
