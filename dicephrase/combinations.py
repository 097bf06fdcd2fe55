# combinations
# (search space size, time to guess)
#

import math

# Largest count the counter represents (unsigned 64-bit)
MAX_COMBINATIONS = 2 ** 64 - 1

GUESSES_PER_SECOND = 1_000_000
DAYS_PER_YEAR = 365.2425


def count_combinations(wordlist_size: int, num_words: int,
                       limit: int = MAX_COMBINATIONS) -> tuple:
    """Compute ``wordlist_size ** num_words``, saturating at `limit`.

    :returns: Tuple (count, overflow). On overflow, count is `limit`.

    """
    if wordlist_size < 0 or num_words < 0:
        raise ValueError("Word list size and number of words must not be negative")
    count = 1
    for _ in range(num_words):
        if wordlist_size <= 1:
            # 0 or 1 stays constant
            return wordlist_size, False
        count *= wordlist_size
        if count > limit:
            return limit, True
    return count, False


def order_of_magnitude(count: int) -> int:
    """Exact ``floor(log10(count))`` for positive integer `count`."""
    if count < 1:
        raise ValueError(f"Order of magnitude undefined for {count}")
    return len(str(count)) - 1


class GuessTime:

    """A primitive time span with hour resolution."""

    def __init__(self, years: float, days: float, hours: float):
        self.years = years
        self.days = days
        self.hours = hours

    def __repr__(self):
        return f"GuessTime(years={self.years}, days={self.days}, hours={self.hours})"

    def __str__(self):
        if self.years < 0.1:
            if self.days < 0.1:
                return f"{self.hours:.0f} hours"
            return f"{self.days:.0f} days, {self.hours:.0f} hours"
        if self.years <= 10 ** 10:
            return f"{self.years:.0f} years, {self.days:.0f} days"
        return f"10^{math.floor(math.log10(self.years))} years"


def time_to_guess(guesses_per_s: float, combinations) -> GuessTime:
    """Rounded-down average time to guess one of `combinations`.

    On average, half of all combinations must be tried.

    """
    try:
        seconds = float(combinations) / guesses_per_s / 2.0
    except OverflowError:
        # beyond float range, whole years are enough
        seconds_per_year = round(DAYS_PER_YEAR * 24 * 60 * 60)
        return GuessTime(years=combinations // round(2 * guesses_per_s * seconds_per_year),
                         days=0, hours=0)
    minutes = seconds / 60.0
    hours = minutes / 60.0
    days = hours / 24.0
    return GuessTime(years=math.floor(days / DAYS_PER_YEAR),
                     days=math.floor(days % DAYS_PER_YEAR),
                     hours=math.floor(hours % 24.0))
