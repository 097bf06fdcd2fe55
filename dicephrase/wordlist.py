# wordlist
# (static word lists for passphrase generation)
#

import functools
import logging
from pathlib import Path

from xkcdpass import xkcd_password

# EFF word lists, as shipped in xkcdpass static data
# See: https://www.eff.org/dice
FULL_WORDLIST = 'eff-long'
SHORT_WORDLIST = 'eff-short'
STATIC_DIR = Path(xkcd_password.__file__).parent / 'static'


class WordlistError(RuntimeError):

    def __init__(self, msg):
        RuntimeError.__init__(self, msg)


def filter_wordlist(lines) -> tuple:
    """Take last token from each line, skip blanks and duplicates.

    Numbered diceware files (``11111<TAB>abacus``) and plain word files
    are both accepted.

    """
    seen = set()
    words = []
    for line in lines:
        tokens = line.split()
        if not tokens:
            continue
        word = tokens[-1]
        if word in seen:
            continue
        seen.add(word)
        words.append(word)
    return tuple(words)


def locate_wordfile(name: str) -> Path:
    """Find a word file by path or by xkcdpass static list name."""
    path = Path(name).expanduser()
    if path.is_file():
        return path
    static_path = STATIC_DIR / name
    if static_path.is_file():
        return static_path
    raise WordlistError(f"Word list not found: {name!r}")


@functools.lru_cache(maxsize=None)
def load_wordlist(name: str = FULL_WORDLIST) -> tuple:
    """Load and return a word list.

    :param name: xkcdpass static word list name or path to a word file
    :returns: Tuple of words, in file order.

    """
    logger = logging.getLogger(__name__)
    path = locate_wordfile(name)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            words = filter_wordlist(f)
    except OSError as e:
        raise WordlistError(f"Cannot read word list {str(path)!r}: {e.strerror}") from e
    if not words:
        raise WordlistError(f"Word list {str(path)!r} is empty")
    logger.debug("loaded %d words from %s", len(words), path)
    return words


def select_wordlist(short: bool = False, wordfile: str = None) -> tuple:
    """Word list for given configuration. Explicit `wordfile` wins."""
    if wordfile:
        return load_wordlist(wordfile)
    return load_wordlist(SHORT_WORDLIST if short else FULL_WORDLIST)
