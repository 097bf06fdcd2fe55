import sys
import argparse
import configparser
import logging
from pathlib import Path

import pyperclip

from . import __version__, pwgen, wordlist
from .ui import PassphraseUI

DATA_DIR = Path('~/.dicephrase')
CONFIG_SECTION = 'dicephrase'


class Config:

    """Defaults for command line options, read from INI file."""

    def __init__(self, config_file=None):
        self.words = pwgen.NUM_WORDS
        self.passphrases = 1
        self.delimiter = pwgen.DELIMITER
        self.short = False
        self.wordfile = None
        if config_file is not None:
            self.load(config_file)

    def load(self, config_file):
        logger = logging.getLogger(__name__)
        config_file = Path(config_file).expanduser()
        logger.debug("loading config %s", config_file)
        config = configparser.ConfigParser(interpolation=None)
        config.read(config_file, encoding='utf-8')
        for section in config.sections():
            if section != CONFIG_SECTION:
                warn(f"unknown section {section!r} in config {str(config_file)!r}")
                continue
            section = config[section]
            for key in section:
                try:
                    if key in ('words', 'passphrases'):
                        value = section.getint(key)
                        if value < 0:
                            raise ValueError(f"must not be negative: {value}")
                        setattr(self, key, value)
                    elif key == 'short':
                        self.short = section.getboolean(key)
                    elif key == 'delimiter':
                        self.delimiter = unquote(section[key])
                    elif key == 'wordfile':
                        self.wordfile = section[key]
                    else:
                        warn(f"unknown key [{section.name!r}] {key!r} in config {str(config_file)!r}")
                except ValueError as e:
                    raise ValueError(f"bad value for {key!r} in config {str(config_file)!r}: {e}") from e


def unquote(value: str) -> str:
    """Strip one pair of double quotes, allowing delimiters with spaces."""
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


def warn(msg):
    print(f"WARNING: {msg}", file=sys.stderr)


def non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return value


def dice_key(text: str) -> list:
    try:
        return pwgen.parse_dice_key(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def run_generate(words, passphrases, delimiter, quiet, short, rolls, copy, wordfile):
    word_list = wordlist.select_wordlist(short=short, wordfile=wordfile)
    if rolls:
        results = [delimiter.join(pwgen.lookup_word(key, word_list) for key in rolls)]
        words = len(rolls)
    else:
        logging.getLogger(__name__).debug("generating %d passphrase(s) of %d words",
                                          passphrases, words)
        results = pwgen.generate_passphrases(passphrases, words, delimiter, word_list)
    ui = PassphraseUI(len(word_list), quiet=quiet, copy=copy)
    ui.show(results, words)


def parse_args(argv=None):
    """Process command line args."""
    ap = argparse.ArgumentParser(prog="dicephrase",
                                 description="Generate diceware-like passphrases",
                                 formatter_class=argparse.RawTextHelpFormatter)
    ap.add_argument('-c', '--config', dest='config_file',
                    default=DATA_DIR / 'dicephrase.conf',
                    help="config file (default: %(default)s)")
    ap.add_argument('-w', '--words', dest='words', type=non_negative_int,
                    metavar='n',
                    help=f"number of words a passphrase shall be made up of "
                         f"(default: {pwgen.NUM_WORDS})")
    ap.add_argument('-n', '--passphrases', dest='passphrases', type=non_negative_int,
                    metavar='n',
                    help="number of passphrases to generate (default: 1)")
    ap.add_argument('-d', '--delimiter', dest='delimiter', metavar='s',
                    help=f"join words with this string (default: {pwgen.DELIMITER!r})")
    ap.add_argument('-q', '--quiet', action='store_true',
                    help="print nothing but the passphrase (implied when -n is used)")
    ap.add_argument('-s', '--short', action='store_true', default=None,
                    help="use the short word list")
    ap.add_argument('-r', '--roll', dest='rolls', type=dice_key, action='append',
                    metavar='key',
                    help="look up the word for a dice roll, e.g. 31415\n"
                         "(repeat for more words)")
    ap.add_argument('-x', '--copy', action='store_true',
                    help="copy the passphrase to clipboard")
    ap.add_argument('--debug', action='store_true',
                    help="print debug messages to stderr")
    ap.add_argument('--version', action='version',
                    version=f"%(prog)s {__version__}")
    return ap.parse_args(args=argv)


def main(argv=None):
    """Main program

    :param argv: Used in tests. Default is sys.argv
    :return: Exit status

    """
    args = parse_args(argv)
    if args.debug:
        logging.basicConfig(level='DEBUG')
    try:
        cfg = Config(args.config_file)
        run_generate(words=cfg.words if args.words is None else args.words,
                     passphrases=cfg.passphrases if args.passphrases is None else args.passphrases,
                     delimiter=cfg.delimiter if args.delimiter is None else args.delimiter,
                     quiet=args.quiet,
                     short=cfg.short if args.short is None else args.short,
                     rolls=args.rolls,
                     copy=args.copy,
                     wordfile=cfg.wordfile)
    except (wordlist.WordlistError, ValueError, pyperclip.PyperclipException) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0
