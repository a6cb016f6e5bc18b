import logging
import re

from gitfilter.hunk import Hunk, LineCounters
from gitfilter.patch import ChangeType, FileEntry


logger = logging.getLogger(__name__)

# diff --git a/path b/path
TARGET_RE = re.compile(r' b/(.+)$')


def scan(diff_text, pattern):
    """ Scan unified diff text for added and removed lines
        matching `pattern`. Returns a list of FileEntry, one for
        each `diff --git` section with a readable target path,
        in the order they appear. Entries without matches are
        kept.

        Malformed input never raises, unattributable lines are
        skipped.
    """
    if isinstance(pattern, str):
        pattern = re.compile(pattern, re.IGNORECASE)

    entries = []
    current = None
    counters = LineCounters.empty()

    for lineno, line in enumerate(diff_text.split('\n')):
        if line.startswith('diff --git '):
            if current is not None:
                entries.append(current)
            match = TARGET_RE.search(line)
            if match:
                current = FileEntry(match.group(1))
            else:
                logger.debug("line %d: no target path in %r", lineno, line)
                current = None
            counters = LineCounters.empty()
            continue

        hunk = Hunk.parse(line)
        if hunk is not None:
            counters = LineCounters.from_hunk(hunk)
            continue

        if current is not None:
            if line.startswith('+') and not line.startswith('+++'):
                content = line[1:]
                if pattern.search(content):
                    current.add(counters.add_line, content, ChangeType.ADD)
            elif line.startswith('-') and not line.startswith('---'):
                content = line[1:]
                if pattern.search(content):
                    current.add(counters.remove_line, content,
                                ChangeType.REMOVE)
        counters = counters.advance(line)

    if current is not None:
        entries.append(current)
    return entries


def matches_message(message, pattern):
    """ Case-sensitive test of `pattern` against a commit message """
    if isinstance(pattern, str):
        pattern = re.compile(pattern)
    return pattern.search(message) is not None


def has_changes(entries):
    return any(len(entry) > 0 for entry in entries)
