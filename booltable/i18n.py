import gettext
import os

from typing import Optional

LOCALE_DIR = os.path.join(os.path.dirname(__file__), 'locale')
language = gettext.translation('booltable', LOCALE_DIR, fallback=True)


def _(x: str) -> str:
    if x == '':
        return ''  # empty string would return the catalog header
    return language.gettext(x)


def set_language(x: Optional[str]):
    global language
    if x:
        language = gettext.translation('booltable', LOCALE_DIR, fallback=True, languages=[x])
