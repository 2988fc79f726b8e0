import io

from colorama import Fore, Style

from rpn.output import Renderer
from rpn.pager import Pager, find_pager


def which(*available):
    return lambda name: '/usr/bin/' + name if name in available else None


class TestFindPager():
    def test_env_pager_wins(self, monkeypatch):
        monkeypatch.setenv('PAGER', 'most -s')
        monkeypatch.setattr('rpn.pager.shutil.which', which('most', 'less'))

        assert find_pager() == (['most', '-s'], False)

    def test_env_less_has_color(self, monkeypatch):
        monkeypatch.setenv('PAGER', 'less -X')
        monkeypatch.setattr('rpn.pager.shutil.which', which('less'))

        assert find_pager() == (['less', '-X'], True)

    def test_missing_env_pager(self, monkeypatch):
        monkeypatch.setenv('PAGER', 'nosuchpager')
        monkeypatch.setattr('rpn.pager.shutil.which', which('less'))

        assert find_pager() == (['/usr/bin/less', '-R'], True)

    def test_fallbacks(self, monkeypatch):
        monkeypatch.delenv('PAGER', raising=False)

        monkeypatch.setattr('rpn.pager.shutil.which', which('more'))
        assert find_pager() == (['/usr/bin/more'], False)

        monkeypatch.setattr('rpn.pager.shutil.which', which())
        assert find_pager() == (None, False)


class TestPager():
    def test_not_a_terminal(self):
        """ Without a terminal the text goes straight through. """
        stream = io.StringIO()

        with Pager(stream) as pager:
            pager.write('one\n')
            pager.write('two\n')

        assert pager.process is None
        assert pager.color_support is False
        assert stream.getvalue() == 'one\ntwo\n'


class TestRenderer():
    def test_plain(self):
        stream = io.StringIO()
        r = Renderer(stream)

        r.write('= 3')
        r.error('ERROR: oops')

        assert r.color is False
        assert stream.getvalue() == '= 3\nERROR: oops\n'

    def test_color(self):
        stream = io.StringIO()
        r = Renderer(stream, color=True)

        r.error('ERROR: oops')

        assert stream.getvalue() == '%sERROR: oops%s\n' % (Fore.RED, Style.RESET_ALL)
        assert r.bold('Basic') == '%sBasic%s' % (Style.BRIGHT, Style.RESET_ALL)
        assert r.bold('Basic', color=False) == 'Basic'

    def test_page(self):
        stream = io.StringIO()
        r = Renderer(stream, color=True)

        r.page(lambda bold: [bold('Title'), 'body'])

        # The pager decides about styling, and a plain stream gets none.
        assert stream.getvalue() == 'Title\nbody\n'
