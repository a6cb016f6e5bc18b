import logging
from os.path import join

from gitfilter import git
from gitfilter.patch import MatchType
from gitfilter.scanner import scan, matches_message, has_changes
from gitfilter.utils import compile_pattern, write_file


logger = logging.getLogger(__name__)


class SearchOptions(object):
    """ Parameters of one history search """

    def __init__(self, since, until, branch, regex,
                 match_type=MatchType.FILE_CHANGE_CONTENT,
                 repo=None, dump_dir=None):
        self.since = since
        self.until = until
        self.branch = branch
        self.regex = regex
        self.match_type = match_type
        self.repo = repo
        self.dump_dir = dump_dir


def _record(reporter, line):
    logger.info(line)
    reporter.add_record(line)


def _record_commit(reporter, commit):
    _record(reporter, "Commit: %s    Time: %s    Author: %s"
            % (commit.id, commit.timestamp, commit.author))
    _record(reporter, "    Message: %s" % commit.message)


def search(options, reporter):
    """ Search commits of `options.branch` between `options.since`
        and `options.until`, add matches to `reporter` and return
        the number of matching commits.

        Raises git.GitError if git fails and re.error for an
        invalid pattern.
    """
    by_message = options.match_type == MatchType.MESSAGE_CONTENT
    pattern = compile_pattern(options.regex, ignorecase=not by_message)

    git.check_branch_exists(options.branch, options.repo)
    commits = git.get_commits(options.since, options.until,
                              options.branch, options.repo)
    logger.debug("%d commits in range", len(commits))
    if not commits:
        _record(reporter, "No commits were found that met the time "
                          "and branch criteria")
        return 0

    found = 0
    for commit in commits:
        if by_message:
            if not matches_message(commit.message, pattern):
                continue
            _record_commit(reporter, commit)
        else:
            diff_text = git.get_commit_diff(commit.id, options.repo)
            if options.dump_dir:
                write_file(join(options.dump_dir, '%s.txt' % commit.id),
                           diff_text)
            entries = scan(diff_text, pattern)
            if not has_changes(entries):
                continue
            _record_commit(reporter, commit)
            for entry in entries:
                if not entry.changes:
                    continue
                _record(reporter, "    filename: %s" % entry.filename)
                for change in entry:
                    _record(reporter, "        line number: %s    type: %s"
                                      "    content: %s"
                            % (change.line_number, change.change_type,
                               change.content))
        _record(reporter, "")
        found += 1

    if found == 0:
        _record(reporter, "%s branch couldn't find any matches"
                % options.branch)
    else:
        _record(reporter, "%s branch found %d matching commits"
                % (options.branch, found))
    return found
