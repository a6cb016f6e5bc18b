import os
import shutil
import subprocess
import unittest
from os.path import join
from tempfile import mkdtemp

from gitfilter import git
from gitfilter.git import GitError, Commit, parse_log
from gitfilter.scanner import scan


HAVE_GIT = shutil.which('git') is not None


def commit_file(repo, filename, content, message, date):
    with open(join(repo, filename), 'w') as f:
        f.write(content)
    env = dict(os.environ, GIT_AUTHOR_DATE=date, GIT_COMMITTER_DATE=date)
    subprocess.check_call(['git', '-C', repo, 'add', filename], env=env)
    subprocess.check_call(['git', '-C', repo, '-c', 'commit.gpgsign=false',
                           'commit', '-q', '-m', message], env=env)


class TestParseLog(unittest.TestCase):
    def test_parse_log(self):
        output = ("abc|2025-03-01 10:00:00 +0100|Jane Doe|fix: a | b\n"
                  "\n"
                  "def|2025-03-02 11:00:00 +0100|John|initial")
        self.assertEqual(parse_log(output), [
            Commit('abc', '2025-03-01 10:00:00 +0100', 'Jane Doe',
                   'fix: a | b'),
            Commit('def', '2025-03-02 11:00:00 +0100', 'John', 'initial')])

    def test_parse_empty_log(self):
        self.assertEqual(parse_log(''), [])


@unittest.skipUnless(HAVE_GIT, "git executable not found")
class TestGitRepository(unittest.TestCase):
    def setUp(self):
        self.tmpdir = mkdtemp(prefix=self.__class__.__name__)
        self.repo = join(self.tmpdir, 'repo')
        os.mkdir(self.repo)
        subprocess.check_call(['git', 'init', '-q', '-b', 'main', self.repo])
        subprocess.check_call(['git', '-C', self.repo, 'config',
                               'user.name', 'Jane Doe'])
        subprocess.check_call(['git', '-C', self.repo, 'config',
                               'user.email', 'jane@example.com'])
        commit_file(self.repo, 'app.js', 'let a = 1;\n',
                    'initial import', '2025-01-10T12:00:00')
        commit_file(self.repo, 'app.js', 'let a = 1;\nconsole.log(a);\n',
                    'JIRA-7 | debug output', '2025-02-10T12:00:00')

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def test_check_branch_exists(self):
        git.check_branch_exists('main', self.repo)

    def test_missing_branch(self):
        with self.assertRaises(GitError) as cm:
            git.check_branch_exists('nope', self.repo)
        self.assertIn("Branch 'nope' does not exist", str(cm.exception))

    def test_not_a_repository(self):
        with self.assertRaises(GitError) as cm:
            git.check_branch_exists('main', self.tmpdir)
        self.assertIn('is not a Git repository', str(cm.exception))

    def test_get_commits_in_range(self):
        commits = git.get_commits('2025-02-01', '2025-03-01', 'main',
                                  self.repo)
        self.assertEqual(len(commits), 1)
        self.assertEqual(commits[0].message, 'JIRA-7 | debug output')
        self.assertEqual(commits[0].author, 'Jane Doe')
        self.assertEqual(len(commits[0].id), 40)

        commits = git.get_commits('2025-01-01', '2025-03-01', 'main',
                                  self.repo)
        self.assertEqual([c.message for c in commits],
                         ['JIRA-7 | debug output', 'initial import'])

    def test_get_commit_diff(self):
        commit = git.get_commits('2025-02-01', '2025-03-01', 'main',
                                 self.repo)[0]
        diff = git.get_commit_diff(commit.id, self.repo)
        self.assertIn('diff --git a/app.js b/app.js', diff)
        self.assertIn('+console.log(a);', diff)

    def test_failing_command(self):
        self.assertRaises(GitError, git.get_commit_diff, 'f' * 40, self.repo)

    def test_file_named_like_branch(self):
        commit_file(self.repo, 'main', 'not a branch\n',
                    'add file named main', '2025-02-20T12:00:00')
        commits = git.get_commits('2025-01-01', '2025-03-01', 'main',
                                  self.repo)
        self.assertEqual(len(commits), 3)

    def test_diff_prefixes_ignore_user_config(self):
        subprocess.check_call(['git', '-C', self.repo, 'config',
                               'diff.noprefix', 'true'])
        commit = git.get_commits('2025-02-01', '2025-03-01', 'main',
                                 self.repo)[0]
        diff = git.get_commit_diff(commit.id, self.repo)
        self.assertIn('diff --git a/app.js b/app.js', diff)
        entries = scan(diff, 'console')
        self.assertEqual([e.filename for e in entries], ['app.js'])
        self.assertEqual(len(entries[0]), 1)


if __name__ == '__main__':
    unittest.main()
