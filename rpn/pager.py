import os
import shlex
import shutil
import subprocess
import sys


def find_pager():
    """
    Returns (command, color_support) for the pager to use, or (None, False)
    when there is none. $PAGER wins, then less, then more.
    """
    env = os.environ.get('PAGER')
    if env:
        cmd = shlex.split(env)
        if cmd and shutil.which(cmd[0]):
            return cmd, os.path.basename(cmd[0]) == 'less'

    less = shutil.which('less')
    if less:
        return [less, '-R'], True
    more = shutil.which('more')
    if more:
        return [more], False
    return None, False


class Pager(object):
    """
    Writes text through a pager program when standard output is a terminal,
    and straight to standard output otherwise.

    Use as a context manager; leaving the block closes the pager's input and
    waits for the user to quit it.
    """
    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdout
        self.process = None
        self.color_support = False

        if self.stream.isatty():
            cmd, self.color_support = find_pager()
            if cmd is None:
                self.color_support = True
            else:
                self.process = subprocess.Popen(cmd, stdin=subprocess.PIPE,
                                                stdout=self.stream, text=True)

    def write(self, text):
        if self.process is not None:
            try:
                self.process.stdin.write(text)
            except BrokenPipeError:
                pass  # user quit the pager early
        else:
            self.stream.write(text)

    def close(self):
        if self.process is None:
            self.stream.flush()
            return
        try:
            self.process.stdin.close()
        except BrokenPipeError:
            pass
        self.process.wait()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
