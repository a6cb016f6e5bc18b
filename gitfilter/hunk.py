import re
from collections import namedtuple


# @@ -R[,N] +R[,N] @@ desc
HUNK_RE = re.compile(r'^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@(.*)')


class Hunk(object):
    """ Parsed hunk header (hunk starts with @@ -R +R @@) """

    def __init__(self):
        self.startsrc = None  #: line count starts with 1
        self.linessrc = None
        self.starttgt = None
        self.linestgt = None
        self.desc = ''

    @classmethod
    def parse(cls, line):
        """ Return Hunk for a hunk header line or None if
            the line is not a hunk header.
        """
        match = HUNK_RE.match(line)
        if not match:
            return None
        hunk = cls()
        hunk.startsrc = int(match.group(1))
        hunk.linessrc = int(match.group(2) or 1)
        hunk.starttgt = int(match.group(3))
        hunk.linestgt = int(match.group(4) or 1)
        hunk.desc = match.group(5).strip()
        return hunk


class LineCounters(namedtuple('LineCounters', 'add_line remove_line')):
    """ Running line numbers for the added and removed side of a
        hunk. Both are None until the first hunk header of a file.
    """
    __slots__ = ()

    @classmethod
    def empty(cls):
        return cls(None, None)

    @classmethod
    def from_hunk(cls, hunk):
        # both sides start from the source file line number
        return cls(hunk.startsrc, hunk.startsrc)

    def advance(self, line):
        """ Return counters after consuming content `line`.

            Context lines move both counters, '+' lines only
            the add side and '-' lines only the remove side.
        """
        add_line, remove_line = self
        if add_line is not None and not line.startswith('-'):
            add_line += 1
        if remove_line is not None and not line.startswith('+'):
            remove_line += 1
        return LineCounters(add_line, remove_line)
