import sys

from typing import Iterable, Iterator, Optional, TextIO, TYPE_CHECKING

from .boolean_ast_tree import BooleanExpressionError, parse, simplify, print_expression
from .logging import Logger
from .truth_table import generate_truth_table, format_truth_table

if TYPE_CHECKING:
    from .simple_config import SimpleConfig

EXIT_COMMAND = 'exit'


def read_stdin_lines(prompt: Optional[str], stdout: TextIO, *, stdin: Optional[TextIO] = None) -> Iterator[str]:
    """Yields lines typed by the user until end of input, printing the prompt before each read.
    Read errors are not caught.
    """
    if stdin is None:
        stdin = sys.stdin
    while True:
        if prompt:
            stdout.write(prompt)
            stdout.flush()
        line = stdin.readline()
        if not line:
            return
        yield line


class Repl(Logger):

    def __init__(self, config: 'SimpleConfig', *, stdout: Optional[TextIO] = None):
        Logger.__init__(self)
        self.config = config
        self.stdout = stdout if stdout is not None else sys.stdout

    def _print(self, text: str) -> None:
        self.stdout.write(text + '\n')

    def run(self, lines: Iterable[str]) -> None:
        for line in lines:
            line = line.rstrip('\r\n')
            if line.strip() == EXIT_COMMAND:
                self.logger.debug('exit requested')
                return
            self.process_line(line)
        self.logger.debug('end of input')

    def run_interactive(self, *, stdin: Optional[TextIO] = None) -> None:
        self.run(read_stdin_lines(self.config.get_prompt(), self.stdout, stdin=stdin))

    def process_line(self, line: str) -> bool:
        """Prints the simplified expression and its truth table.
        Returns False if an error was printed instead.
        """
        try:
            tree = parse(line)
        except BooleanExpressionError as e:
            self.logger.info(f'cannot parse {line!r}: {e!r}')
            self._print(str(e))
            return False
        tree = simplify(tree)
        self._print(print_expression(tree))
        try:
            table = generate_truth_table(tree)
        except BooleanExpressionError as e:
            self.logger.info(f'cannot tabulate {line!r}: {e!r}')
            self._print(str(e))
            return False
        for text in format_truth_table(table, tree):
            self._print(text)
        return True
