import argparse
import sys

from typing import List, Optional, TextIO

from .i18n import _, set_language
from .logging import configure_logging, get_logger
from .repl import Repl
from .simple_config import SimpleConfig
from .version import BOOLTABLE_VERSION

_logger = get_logger(__name__)


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='booltable',
        description=_('booltable - a simple CLI to solve boolean algebra'),
        epilog=_('Type an expression such as "A NAND (B XOR C)" at the prompt, or "exit" to quit.'))
    parser.add_argument('--version', action='version', version=f'%(prog)s {BOOLTABLE_VERSION}')
    parser.add_argument('-v', '--verbose', dest='verbosity', action='store_true', default=None,
                        help=_('Show debug logs on stderr'))
    parser.add_argument('--no-prompt', dest='prompt', action='store_false', default=None,
                        help=_('Do not print a prompt before reading each line'))
    parser.add_argument('-e', '--expression', dest='expressions', action='append', metavar='EXPR',
                        help=_('Evaluate EXPR instead of reading from stdin. Can be repeated.'))
    parser.add_argument('--lang', dest='language', default=None, help=_('Language of messages, e.g. "de_DE"'))
    return parser


def main(argv: Optional[List[str]] = None, *, stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None) -> int:
    parser = get_parser()
    args = parser.parse_args(argv)
    # options left unset fall back to the config defaults
    config_options = {k: v for k, v in vars(args).items() if v is not None}
    expressions = config_options.pop('expressions', None)

    config = SimpleConfig(config_options)
    configure_logging(config)
    set_language(config.get('language'))
    _logger.debug(f'booltable {BOOLTABLE_VERSION} starting. options: {config_options}')

    repl = Repl(config, stdout=stdout)
    if expressions:
        repl.run(expressions)
    else:
        repl.run_interactive(stdin=stdin)
    return 0


if __name__ == '__main__':
    sys.exit(main())
