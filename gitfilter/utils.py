import os
import re
from datetime import datetime

from dateutil import parser as dateutil_parser


TIME_FORMAT = '%Y-%m-%d %H:%M:%S'


def compile_pattern(regex, ignorecase=True):
    """ Compile search pattern. Diff content is matched
        case-insensitively, commit messages are not.
        Invalid expressions raise re.error.
    """
    flags = re.IGNORECASE if ignorecase else 0
    return re.compile(regex, flags)


def parse_time(name, value):
    """ Normalize a --since/--until value to `TIME_FORMAT`.

        Values dateutil can't read ("1 week ago", "yesterday")
        are returned as is, git understands those itself.
    """
    if value is None or not value.strip():
        raise ValueError("%s is invalid: empty value" % name)
    try:
        dt = dateutil_parser.parse(value)
    except (ValueError, OverflowError):
        return value.strip()
    if dt.tzinfo is not None:
        # git reads the result as local time
        dt = dt.astimezone().replace(tzinfo=None)
    return dt.strftime(TIME_FORMAT)


def now():
    return datetime.now().strftime(TIME_FORMAT)


def write_file(filename, content):
    """ Write text file, creating missing parent directories """
    dirname = os.path.dirname(filename)
    if dirname and not os.path.exists(dirname):
        os.makedirs(dirname)
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(content)
