import logging
import re
import sys

from gitfilter import __version__
from gitfilter.git import GitError
from gitfilter.history import SearchOptions, search
from gitfilter.report import Reporter
from gitfilter.utils import parse_time, now


def main(argv=None):
    from optparse import OptionParser

    opt = OptionParser(usage="%prog --since DATE --branch NAME "
                             "--regex PATTERN [options]\n\n"
                             "  1. %prog --since 2025-01-01 --until 2025-03-27"
                             " --branch main --regex 'console\\.log'\n"
                             "  2. %prog --since '1 week ago' --until yesterday"
                             " --branch develop --regex 'JIRA-\\d+' --type 1",
                       version="gitfilter %s" % __version__)
    opt.add_option("--since", metavar="DATE",
                   help="start of the time window, e.g. 2025-01-01")
    opt.add_option("--until", metavar="DATE",
                   help="end of the time window (default: now)")
    opt.add_option("--branch", metavar="NAME",
                   help="branch to search, e.g. main")
    opt.add_option("--regex", metavar="PATTERN",
                   help="regular expression to match, e.g. console\\.log")
    opt.add_option("--type", dest="match_type", type="choice",
                   choices=["0", "1"], default="0",
                   help="0 - match changed file content (default), "
                        "1 - match commit messages")
    opt.add_option("-C", "--repo", metavar="DIR",
                   help="repository directory (default: current)")
    opt.add_option("-o", "--output-dir", metavar="DIR", default=".",
                   help="directory for the report file")
    opt.add_option("--name", default="gitMatchRecord",
                   help="report name, written as NAME.txt")
    opt.add_option("--dump-diffs", metavar="DIR",
                   help="save each scanned commit diff to DIR/<id>.txt")
    opt.add_option("-q", "--quiet", action="store_const", dest="verbosity",
                   const=0, help="print only warnings and errors", default=1)
    opt.add_option("-v", "--verbose", action="count", dest="verbosity",
                   help="print debug output")
    opt.add_option("--debug", action="store_true",
                   help="same as --verbose")
    (options, args) = opt.parse_args(argv)

    for required in ("since", "branch", "regex"):
        if getattr(options, required) is None:
            opt.error("--%s is required" % required)

    setup_logging(2 if options.debug else options.verbosity)

    try:
        re.compile(options.regex)
    except re.error as e:
        opt.error("invalid --regex %r: %s" % (options.regex, e))
    try:
        since = parse_time("since", options.since)
        until = parse_time("until", options.until) if options.until else now()
    except ValueError as e:
        opt.error(str(e))

    search_options = SearchOptions(since, until, options.branch,
                                   options.regex,
                                   match_type=int(options.match_type),
                                   repo=options.repo,
                                   dump_dir=options.dump_diffs)
    reporter = Reporter(options.name)
    logger = logging.getLogger('gitfilter')
    try:
        search(search_options, reporter)
        if reporter.has_record():
            _, filepath = reporter.render_to_file(options.output_dir)
            logger.info("report saved to %s" % filepath)
    except GitError as e:
        logger.error(str(e))
        sys.exit(1)
    except OSError as e:
        logger.error("unable to write output: %s" % e)
        sys.exit(1)


def setup_logging(verbosity):
    logger = logging.getLogger('gitfilter')
    levels = [logging.WARNING, logging.INFO, logging.DEBUG]
    logger.setLevel(levels[min(2, verbosity)])
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)


if __name__ == "__main__":
    main()
