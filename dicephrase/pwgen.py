# pwgen
# (diceware passphrase generator)
#

from random import SystemRandom

from .wordlist import load_wordlist

random = SystemRandom()

NUM_WORDS = 4
DELIMITER = ' '
DIE_SIDES = 6


def random_index(size: int) -> int:
    """Uniformly random index in range [0, size)."""
    if size <= 0:
        raise ValueError("Cannot select from an empty word list")
    return random.randrange(size)


def get_word(words=None) -> str:
    """Get a random word from `words` (default: the full word list)."""
    if words is None:
        words = load_wordlist()
    return words[random_index(len(words))]


def generate_passphrase(num_words: int = NUM_WORDS,
                        delimiter: str = DELIMITER,
                        words=None) -> str:
    """Generate random passphrase made up of `num_words` dictionary words.

    Words are drawn independently, so the same word may appear twice.

    :param num_words: Number of words, zero gives an empty passphrase
    :param delimiter: Put this between the words
    :param words: Word list to draw from (default: the full word list)
    :returns: The passphrase.

    """
    if num_words < 0:
        raise ValueError(f"Number of words must not be negative: {num_words}")
    if words is None:
        words = load_wordlist()
    return delimiter.join(get_word(words) for _ in range(num_words))


def generate_passphrases(count: int,
                         num_words: int = NUM_WORDS,
                         delimiter: str = DELIMITER,
                         words=None) -> list:
    return [generate_passphrase(num_words, delimiter, words)
            for _ in range(count)]


def roll_dice(n: int) -> list:
    """Roll `n` dice, return the results (1..6)."""
    return [random.randint(1, DIE_SIDES) for _ in range(n)]


def dice_to_index(key) -> int:
    """Translate the diceware key to an index.

    Each die result minus one is a base-6 digit, the first die
    being the most significant. E.g. ``[6, 5, 4, 3, 2]`` reads as
    54321 in base 6, which is index 7465.

    """
    index = 0
    for n in key:
        if not 1 <= n <= DIE_SIDES:
            raise ValueError(f"Invalid die result: {n}")
        index = index * DIE_SIDES + (n - 1)
    return index


def dice_per_word(words):
    """Number of dice addressing one word of `words`, None if the list
    size is not a power of six."""
    size, n = len(words), 0
    while size > 1 and size % DIE_SIDES == 0:
        size //= DIE_SIDES
        n += 1
    return n if size == 1 and n > 0 else None


def parse_dice_key(text: str) -> list:
    """Parse ``"31415"`` into ``[3, 1, 4, 1, 5]``."""
    if not text or not all(c in '123456' for c in text):
        raise ValueError(f"Invalid dice key {text!r}: use digits 1 to 6")
    return [int(c) for c in text]


def lookup_word(key, words=None) -> str:
    """Get the word addressed by dice `key` (string or sequence of ints)."""
    if words is None:
        words = load_wordlist()
    if isinstance(key, str):
        key = parse_dice_key(key)
    num_dice = dice_per_word(words)
    if num_dice is None:
        raise ValueError(f"Word list of {len(words)} words cannot be used with dice")
    if len(key) != num_dice:
        raise ValueError(f"Dice key must have {num_dice} dice, got {len(key)}")
    return words[dice_to_index(key)]


if __name__ == '__main__':
    for _ in range(10):
        print(generate_passphrase(), ' ', lookup_word(roll_dice(5)))
