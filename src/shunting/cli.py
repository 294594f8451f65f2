from os import path
import sys
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .util import ExpressionError
from .lexer import Tokenizer
from .engine import Engine


class InteractiveInput:
    def __init__(self, prompt, history_file=None):
        self.prompt = prompt
        self.history_file = history_file

    def __iter__(self):
        history = None
        if self.history_file is not None:
            history = FileHistory(path.expanduser(self.history_file))
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    history=history,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the expression engine.
    '''

    DEFAULT_PROMPT = '= '
    HISTORY_FILE = '~/.shunting_history'

    def dumper(self, engine, line):
        '''
        Print tokens, postfix, and fully parenthesised tree.
        '''
        print(*engine.tokenize(line),
              sep=' ', end='\t')
        print(*engine.tokenize_and_convert(line),
              sep=' ', end='\t')
        print(engine.parse(line).infix())

    def tree(self, engine, line):
        '''
        Print expression tree, one node per line.
        '''
        print(engine.parse(line).pretty())

    def executor(self, engine, line):
        '''
        Print value of expression.
        '''
        print(engine.evaluate(line))

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        print(Tokenizer.grammar())

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           sys.stdin.isatty() and sys.stdout.isatty():
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    history_file=self.HISTORY_FILE)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Infix arithmetic calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('--lenient',
                                          action='store_false',
                                          dest='strict',
                                          help='drop unclosed parentheses')
        self.argument_parser.add_argument('--max-tokens', type=int,
                                          default=Tokenizer.MAX_TOKENS)
        self.argument_parser.add_argument('--max-token-length', type=int,
                                          default=Tokenizer.MAX_TOKEN_LENGTH)
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions',
                                       help='expression, from all remaining '
                                       'words')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper),
                                      ('-T', '--tree', self.tree)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=sys.stdin)

    def _each(self, engine):
        '''
        Run action on every expression, reporting bad ones on stderr.

        Return number of failed expressions.
        '''
        failures = 0
        for line in self.args.expressions:
            line = line.rstrip('\n')
            if not line.strip():
                continue
            try:
                self.args.action(engine, line)
            # Abort this line only; the rest may well be fine.
            except ExpressionError as e:
                failures += 1
                print('{}: {}'.format(type(e).__name__, e), file=sys.stderr)
        return failures

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.

        Return exit status.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(level=logging.DEBUG if self.args.verbose
                            else logging.WARNING)
        if self.args.action == self.raw_grammar:
            self.args.action()
            return 0
        if self.args.expressions is sys.stdin:
            self.args.expressions = self._prompting_input()
        else:
            self.args.expressions = [' '.join(self.args.expressions)]
        engine = Engine.configured(
            max_tokens=self.args.max_tokens,
            max_token_length=self.args.max_token_length,
            strict=self.args.strict)
        try:
            return 1 if self._each(engine) else 0
        except KeyboardInterrupt:
            return 1


def main():
    sys.exit(CLI().run())
