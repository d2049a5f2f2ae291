import threading

from typing import Any, Dict, Optional

from .logging import Logger

DEFAULT_PROMPT_TEXT = 'booltable> '

# key -> default value, for the options this client understands
KNOWN_OPTIONS = {
    'prompt': True,
    'prompt_text': DEFAULT_PROMPT_TEXT,
    'verbosity': False,
    'language': None,
}


class SimpleConfig(Logger):
    """
    The SimpleConfig class is responsible for handling operations involving
    configuration values.

    Values given on the command line take precedence over values set at
    runtime via set_key, which in turn take precedence over the defaults
    in KNOWN_OPTIONS.
    """

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        if options is None:
            options = {}
        Logger.__init__(self)
        self.lock = threading.RLock()
        unknown = set(options) - set(KNOWN_OPTIONS)
        if unknown:
            self.logger.warning(f'ignoring unknown config keys: {sorted(unknown)}')
        self.cmdline_options = {k: v for k, v in options.items() if k in KNOWN_OPTIONS}
        self.user_config = {}  # type: Dict[str, Any]

    def get(self, key: str, default=None) -> Any:
        with self.lock:
            if key in self.cmdline_options:
                return self.cmdline_options[key]
            if key in self.user_config:
                return self.user_config[key]
        if default is None:
            default = KNOWN_OPTIONS.get(key)
        return default

    def is_modifiable(self, key: str) -> bool:
        return key not in self.cmdline_options

    def set_key(self, key: str, value: Any) -> None:
        if not self.is_modifiable(key):
            self.logger.warning(f'not changing config key {key!r} set on the command line')
            return
        with self.lock:
            if value is not None:
                self.user_config[key] = value
            else:
                self.user_config.pop(key, None)

    def get_prompt(self) -> Optional[str]:
        """Returns the prompt to print before each read, or None if prompting is off."""
        if not self.get('prompt'):
            return None
        return self.get('prompt_text')
