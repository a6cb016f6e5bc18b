from importlib.metadata import version, PackageNotFoundError

import logging

from gitfilter.scanner import scan
from gitfilter.utils import compile_pattern

try:
    __version__ = version(__name__)
except PackageNotFoundError:
    # package is not installed
    __version__ = 'unknown'

logger = logging.getLogger('gitfilter')
logger.addHandler(logging.NullHandler())


def fromstring(s, regex):
    """ Scan diff text for lines matching `regex`
        (case-insensitive), return list of FileEntry.
    """
    return scan(s, compile_pattern(regex))


def fromfile(filename, regex):
    """ Scan a saved diff file, e.g. one written
        with --dump-diffs. Returns list of FileEntry.
    """
    logger.debug("reading %s" % filename)
    with open(filename, encoding='utf-8', errors='replace') as fp:
        return fromstring(fp.read(), regex)
