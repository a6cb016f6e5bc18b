import logging
import subprocess
from collections import namedtuple


logger = logging.getLogger(__name__)

LOG_FORMAT = '%H|%ci|%an|%s'

Commit = namedtuple('Commit', 'id timestamp author message')


class GitError(Exception):
    """ git command failed or repository checks did not pass """

    def __init__(self, message, cmd=None, stderr=''):
        Exception.__init__(self, message)
        self.cmd = cmd
        self.stderr = stderr


def run_git(args, repo=None, check=True):
    """ Run git with `args` and return CompletedProcess.
        Raises GitError on non-zero exit if `check` is set.
    """
    cmd = ['git']
    if repo:
        cmd += ['-C', repo]
    cmd += list(args)
    logger.debug("git cmd: %s", ' '.join(cmd))
    try:
        proc = subprocess.run(cmd, stdout=subprocess.PIPE,
                              stderr=subprocess.PIPE,
                              encoding='utf-8', errors='replace')
    except OSError as e:
        raise GitError("unable to run git: %s" % e, cmd)
    if check and proc.returncode != 0:
        raise GitError("%s failed with exit code %d: %s"
                       % (' '.join(cmd), proc.returncode,
                          proc.stderr.strip()),
                       cmd, proc.stderr)
    return proc


def check_branch_exists(branch, repo=None):
    if run_git(['rev-parse', '--is-inside-work-tree'],
               repo, check=False).returncode != 0:
        raise GitError("%s is not a Git repository"
                       % (repo or 'Current directory'))
    ref = 'refs/heads/%s' % branch
    if run_git(['show-ref', '--verify', '--quiet', ref],
               repo, check=False).returncode != 0:
        raise GitError("Branch '%s' does not exist in this repository"
                       % branch)


def parse_log(output):
    """ Parse `git log --pretty=format:%H|%ci|%an|%s` output """
    commits = []
    for line in output.split('\n'):
        if not line:
            continue
        # message itself may contain '|'
        parts = line.split('|', 3)
        while len(parts) < 4:
            parts.append('')
        commits.append(Commit(*parts))
    return commits


def get_commits(since, until, branch, repo=None):
    proc = run_git(['log', branch, '--since=%s' % since,
                    '--until=%s' % until,
                    '--pretty=format:%s' % LOG_FORMAT, '--'], repo)
    return parse_log(proc.stdout)


def get_commit_diff(commit_id, repo=None):
    return run_git(['show', '--no-color', '--src-prefix=a/',
                    '--dst-prefix=b/', commit_id], repo).stdout
