from os.path import join

from gitfilter.utils import write_file


class Reporter(object):
    """ Accumulates report lines and saves them as
        <output_dir>/<name>.txt
    """
    def __init__(self, name='gitMatchRecord'):
        self.name = name
        self.records = []

    def add_record(self, record):
        self.records.append(record)

    def has_record(self):
        return len(self.records) > 0

    def render(self):
        return '\n'.join(self.records)

    def report_path(self, output_dir):
        return join(output_dir, '%s.txt' % self.name)

    def render_to_file(self, output_dir):
        content = self.render()
        filepath = self.report_path(output_dir)
        write_file(filepath, content)
        return content, filepath
