# PassphraseUI
# (batch and verbose output)
#

import logging
import sys

from blessed import Terminal
import pyperclip

from .combinations import (count_combinations, order_of_magnitude,
                           time_to_guess, GUESSES_PER_SECOND)

# letters and digits, for the "scheme unknown" estimate
NUM_PLAIN_CHARS = 62


class PassphraseUI:

    """Print generated passphrases.

    Batch mode prints one passphrase per line and nothing else.
    It's selected unless exactly one passphrase is requested without `quiet`.
    Verbose mode adds the size of the search space and time estimates.

    """

    def __init__(self, wordlist_size: int, quiet: bool = False, copy: bool = False):
        self._wordlist_size = wordlist_size
        self._quiet = quiet
        self._copy_enabled = copy
        self._term = Terminal(stream=sys.stdout)

    def _copy(self, text):
        """Wraps copy-to-clipboard function to allow overriding."""
        pyperclip.copy(text)

    def batch_mode(self, num_passphrases: int) -> bool:
        return num_passphrases != 1 or self._quiet

    def show(self, passphrases, num_words: int):
        if self.batch_mode(len(passphrases)):
            for passphrase in passphrases:
                print(passphrase)
        else:
            self.show_verbose(passphrases[0], num_words)
        if self._copy_enabled and passphrases:
            self._copy(passphrases[-1])
            if not self.batch_mode(len(passphrases)):
                print("Copied to clipboard.")

    def show_verbose(self, passphrase: str, num_words: int):
        logger = logging.getLogger(__name__)
        t = self._term
        combinations, overflow = count_combinations(self._wordlist_size, num_words)
        logger.debug("combinations: %d (overflow: %s)", combinations, overflow)
        qualifier = 'over' if overflow else 'about'
        print("Your passphrase is:")
        print()
        print('\t' + t.bold(passphrase))
        print()
        print(f"This passphrase is one of {qualifier} "
              f"10^{order_of_magnitude(combinations)} possible combinations.")
        print()
        print(f"Assuming {GUESSES_PER_SECOND:,} guesses per second, "
              f"the average time it takes to guess your passphrase is:")
        print(f"\t{format_guess_time(combinations, overflow)} "
              f"if the attacker knows the scheme used to generate your passphrase")
        plain_combinations = NUM_PLAIN_CHARS ** len(passphrase)
        print(f"\t{time_to_guess(GUESSES_PER_SECOND, plain_combinations)} "
              f"if the attacker does not know the scheme")


def format_guess_time(combinations: int, overflow: bool) -> str:
    text = str(time_to_guess(GUESSES_PER_SECOND, combinations))
    return "more than " + text if overflow else text
