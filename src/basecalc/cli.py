from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging
import sys

from prompt_toolkit import PromptSession

from .util import CalcError
from .machine import Machine
from .logging_config import setup_logging


log = logging.getLogger(__name__)


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    # Nothing is kept between sessions.
                                    history=None,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the calculator.
    '''

    DEFAULT_PROMPT = '> '
    EXAMPLE = 'td10+td20+td50=hfp16'

    def executor(self):
        '''
        Evaluate each expression, printing its result.

        A bad expression is reported and skipped. Returns the exit status.
        '''
        machine = Machine()
        status = 0
        expressions = self.args.expressions
        if expressions is None:
            expressions = self._prompting_input()
        for line in expressions:
            line = line.strip()
            if not line:
                continue
            try:
                result = machine.evaluate(line)
            except CalcError as e:
                log.debug('Failed on %r', line, exc_info=True)
                print('error:', e, file=sys.stderr)
                status = 1
            else:
                print(result)
        return status

    def example(self):
        '''
        Evaluate the demonstration expression.
        '''
        print(Machine().evaluate(self.EXAMPLE))
        return 0

    def _prompting_input(self):
        '''
        Return prompting input iterable if either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           sys.stdin.isatty() and sys.stdout.isatty():
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Typed-literal base calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='log evaluation steps')
        self.argument_parser.add_argument('--log-file',
                                          metavar='PATH',
                                          help='also write the log to PATH')
        input_groups = self.argument_parser.add_mutually_exclusive_group()
        input_groups.add_argument('-e', '--expression',
                                  nargs=REMAINDER,
                                  dest='expressions')
        input_groups.add_argument('-p', '--prompt',
                                  nargs=OPTIONAL,
                                  const=self.DEFAULT_PROMPT)
        self.argument_parser.add_argument('-x', '--example',
                                          action='store_const',
                                          const=self.example,
                                          dest='action',
                                          help='evaluate ' + self.EXAMPLE)
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=None)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or the process's command line.

        Returns the exit status.
        '''
        self.args = self.argument_parser.parse_args(args)
        setup_logging(logging.DEBUG if self.args.verbose else logging.WARNING,
                      log_file=self.args.log_file)
        try:
            return self.args.action()
        except KeyboardInterrupt:
            return 1


def main():
    sys.exit(CLI().run())
