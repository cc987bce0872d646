from argparse import ArgumentParser, REMAINDER, OPTIONAL
import sys
import traceback

from prompt_toolkit import PromptSession

from .util import RPNError, OutOfMemory
from .machine import Machine
from .lexer import Lexer


EXIT_OK = 0
EXIT_FAILURE = 2


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    history=None,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the big integer RPN calculator.

    Without arguments, reads one line from stdin, evaluates it, and prints
    the result. Exit status is 0 on success, 1 on a bad expression, 2 when
    input can't be read or memory runs out.
    '''

    DEFAULT_PROMPT = '> '

    def dumper(self):
        '''
        Dump all lexemes: groups, text, and offset.
        '''
        lexer = Lexer()
        print('[groups]\t<repr(lexeme)>\t<position>')
        status = EXIT_OK
        for line in self._lines():
            try:
                for match in lexer.lex(line):
                    print(*lexer.matchedgroups(match).keys(),
                          repr(match.group(0)),
                          match.start(),
                          sep='\t')
            except RPNError as e:
                status = max(status, self._report(e))
        return status

    def executor(self):
        '''
        Run machine (RPN calculator) on every input line.
        '''
        machine = Machine()
        status = EXIT_OK
        for line in self._lines():
            try:
                print(machine.evaluate(line).to_string())
            # Rendering allocates too
            except MemoryError:
                status = max(status, self._report(OutOfMemory(
                    'Memory allocation failed')))
            except RPNError as e:
                status = max(status, self._report(e))
        # Errors were already shown, line by line
        if self._interactive():
            return EXIT_OK
        return status

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        print(Lexer.LEXEME)
        return EXIT_OK

    def _report(self, error):
        '''
        Print error to stderr, and return its exit status.
        '''
        if self.args.verbose:
            traceback.print_exception(type(error), error,
                                      error.__traceback__)
        print(error.message, file=sys.stderr)
        return error.exit_status

    def _lines(self):
        '''
        Yield input lines, trailing newline stripped.

        Stdin, non-interactively, gives exactly one line.
        '''
        expressions = self.args.expressions
        if expressions is None:
            line = sys.stdin.readline()
            if not line:
                raise EOFError('Failed to read input')
            expressions = [line]
        for line in expressions:
            yield line.rstrip('\n')

    def _prompting_input(self):
        '''
        Return prompting input if either:

        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           sys.stdin.isatty() and sys.stdout.isatty():
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return None

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            prog='bigrpn',
            description='Arbitrary precision integer RPN calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='show tracebacks on errors')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions',
                                       help='evaluate these instead of stdin')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT,
                                       help='interactive, one expression '
                                            'per line')
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=None)

    def _interactive(self):
        return isinstance(self.args.expressions, InteractiveInput)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or the process's, and return exit status.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.expressions is None:
            self.args.expressions = self._prompting_input()
        try:
            return self.args.action()
        except EOFError as e:
            print(e.args[0], file=sys.stderr)
            return EXIT_FAILURE
        except KeyboardInterrupt:
            return 1


def main():
    sys.exit(CLI().run())
