from collections import namedtuple


class ChangeType(object):
    ADD = 'ADD'
    REMOVE = 'REMOVE'


class MatchType(object):
    FILE_CHANGE_CONTENT = 0
    MESSAGE_CONTENT = 1


class LineMatch(namedtuple('LineMatch', 'line_number content change_type')):
    """ Single changed line that matched the search pattern """
    __slots__ = ()

    def as_dict(self):
        return {'lineNumber': self.line_number,
                'content': self.content,
                'changeType': self.change_type}


class FileEntry(object):
    """ Matches for a single file of a diff.
        If used as an iterable, returns matched lines.
    """
    def __init__(self, filename):
        self.filename = filename
        self.changes = []

    def __iter__(self):
        for change in self.changes:
            yield change

    def __len__(self):
        return len(self.changes)

    def __eq__(self, other):
        if not isinstance(other, FileEntry):
            return NotImplemented
        return (self.filename, self.changes) == (other.filename, other.changes)

    def __repr__(self):
        return 'FileEntry(%r, %r)' % (self.filename, self.changes)

    def add(self, line_number, content, change_type):
        self.changes.append(LineMatch(line_number, content, change_type))

    def as_dict(self):
        return {'filename': self.filename,
                'changes': [c.as_dict() for c in self.changes]}
