import logging
import sys

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .simple_config import SimpleConfig


class LogFormatterForConsole(logging.Formatter):

    def format(self, record):
        record = _shorten_name_of_logrecord(record)
        return super().format(record)


def _shorten_name_of_logrecord(record: logging.LogRecord) -> logging.LogRecord:
    record = logging.makeLogRecord(record.__dict__)  # copy
    # strip the main module name from the logger name
    if record.name.startswith('booltable.'):
        record.name = record.name[len('booltable.'):]
    return record


# enable logs universally (including for other libraries)
_root_logger = logging.getLogger('booltable')
_root_logger.setLevel(logging.DEBUG)

_console_handler = None  # type: Optional[logging.Handler]


def _configure_console_logging(*, verbose: bool):
    global _console_handler
    if _console_handler is None:
        _console_handler = logging.StreamHandler(sys.stderr)
        _console_handler.setFormatter(LogFormatterForConsole(
            fmt='%(levelname).1s | %(name)s | %(message)s'))
        _root_logger.addHandler(_console_handler)
    _console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    if name.startswith('booltable.'):
        name = name[len('booltable.'):]
    return _root_logger.getChild(name)


_logger = get_logger(__name__)


class Logger:

    def __init__(self):
        self.logger = self.__get_logger_for_obj()

    def __get_logger_for_obj(self) -> logging.Logger:
        cls = self.__class__
        if cls.__module__:
            name = f'{cls.__module__}.{cls.__name__}'
        else:
            name = cls.__name__
        return get_logger(name)


def configure_logging(config: 'SimpleConfig'):
    verbose = bool(config.get('verbosity'))
    _configure_console_logging(verbose=verbose)
    _logger.debug(f'logging configured. verbose={verbose}')
