"""Puzzles about strings, words and number names."""

from __future__ import annotations

import os
from collections import Counter
from collections.abc import Iterable
from string import ascii_letters, ascii_uppercase, digits

WEEKDAYS = ("MON", "TUE", "WED", "THU", "FRI", "SAT", "SUN")

CHINESE_DIGITS = ("ling", "yi", "er", "san", "si", "wu", "liu", "qi", "ba", "jiu")
CHINESE_UNITS = ("", " Shi", " Bai", " Qian")
CHINESE_GROUP_UNITS = ("", " Wan", " Yi")
NEGATIVE_WORD = "Fu"

KEYBOARD = digits + ascii_uppercase + "_"

NO_COMMON_SUFFIX = "nai"

MARS_LOW = ("tret", "jan", "feb", "mar", "apr", "may", "jun", "jly", "aug", "sep", "oct", "nov", "dec")
MARS_HIGH = ("tret", "tam", "hel", "maa", "huh", "tou", "kes", "hei", "elo", "syy", "lok", "mer", "jou")
_MARS_VALUES = {
    **{word: value for value, word in enumerate(MARS_LOW)},
    **{word: value * 13 for value, word in enumerate(MARS_HIGH) if value},
}
MARS_LIMIT = 13 * 13


def _is_alphanumeric(char: str) -> bool:
    return char in ascii_letters or char in digits


def decode_dating(first: str, second: str, third: str, fourth: str) -> str:
    """Decode the weekday and time hidden in four strings, e.g. ``THU 14:04``.

    The day is the first common capital ``A``-``G`` at the same position of the
    first two strings, the hour the next common digit or ``A``-``N`` after it,
    and the minute the position of the first common letter in the last two.
    """
    pairs = list(zip(first, second))
    day_position = next(
        (
            position
            for position, (a, b) in enumerate(pairs)
            if a == b and "A" <= a <= "G"
        ),
        None,
    )
    if day_position is None:
        raise ValueError("no weekday is hidden in the first two strings")
    day = WEEKDAYS[ord(pairs[day_position][0]) - ord("A")]

    hour = None
    for a, b in pairs[day_position + 1 :]:
        if a != b:
            continue
        if a in digits:
            hour = int(a)
            break
        if "A" <= a <= "N":
            hour = ord(a) - ord("A") + 10
            break
    if hour is None:
        raise ValueError("no hour is hidden in the first two strings")

    minute = next(
        (
            position
            for position, (a, b) in enumerate(zip(third, fourth))
            if a == b and a in ascii_letters
        ),
        None,
    )
    if minute is None:
        raise ValueError("no minute is hidden in the last two strings")
    return f"{day} {hour:02d}:{minute:02d}"


def _words(text: str) -> Iterable[str]:
    word: list[str] = []
    for char in text:
        if _is_alphanumeric(char):
            word.append(char)
        elif word:
            yield "".join(word).lower()
            word = []
    if word:
        yield "".join(word).lower()


def most_frequent_word(text: str) -> tuple[str, int]:
    """Return the most frequent alphanumeric word (lower-cased) and its count.

    On a tie the word that first reached the top count wins; an empty text
    gives ``("", 0)``.
    """
    counts: Counter[str] = Counter()
    best_word, best_count = "", 0
    for word in _words(text):
        counts[word] += 1
        if counts[word] > best_count:
            best_word, best_count = word, counts[word]
    return best_word, best_count


def kuchiguse(lines: Iterable[str]) -> str:
    """Return the longest common suffix of the lines, or ``nai`` when it is empty."""
    reversed_lines = [line[::-1] for line in lines]
    if not reversed_lines:
        raise ValueError("at least one line is needed")
    suffix = os.path.commonprefix(reversed_lines)[::-1]
    return suffix or NO_COMMON_SUFFIX


def _group_to_chinese(group: str) -> str:
    words: list[str] = []
    for position, char in enumerate(reversed(group)):
        digit = int(char)
        if digit == 0:
            if not words or words[-1] == CHINESE_DIGITS[0]:
                continue
            words.append(CHINESE_DIGITS[0])
        else:
            words.append(CHINESE_DIGITS[digit] + CHINESE_UNITS[position])
    return " ".join(reversed(words))


def read_number_chinese(number: str | int) -> str:
    """Spell an integer of at most twelve digits in Chinese pinyin."""
    text = str(number).strip()
    negative = text.startswith("-")
    if negative:
        text = text[1:]
    if not text or not all(char in digits for char in text):
        raise ValueError(f"not an integer: {number!r}")
    text = text.lstrip("0")
    if len(text) > 4 * len(CHINESE_GROUP_UNITS):
        raise ValueError(f"too many digits: {number!r}")

    parts: list[str] = []
    for index, end in enumerate(range(len(text), 0, -4)):
        spoken = _group_to_chinese(text[max(0, end - 4) : end])
        if spoken:
            parts.append(spoken + CHINESE_GROUP_UNITS[index])
    if not parts:
        parts.append(CHINESE_DIGITS[0])
    if negative:
        parts.append(NEGATIVE_WORD)
    return " ".join(reversed(parts))


def worn_out_keys(expected: str, typed: str) -> str:
    """Return the keys, upper-cased and in order of first use, that failed to type."""
    expected, typed = expected.upper(), typed.upper()
    for char in expected + typed:
        if char not in KEYBOARD:
            raise ValueError(f"unexpected key: {char!r}")
    typed_keys = set(typed)
    missing = [char for char in expected if char not in typed_keys]
    return "".join(dict.fromkeys(missing))


def check_beads(shop: str, wanted: str) -> str:
    """Tell whether the shop string holds every wanted bead.

    Gives ``Yes <extra beads>`` or ``No <missing beads>``.
    """
    for char in shop + wanted:
        if not _is_alphanumeric(char):
            raise ValueError(f"unexpected bead colour: {char!r}")
    available = Counter(shop)
    needed = Counter(wanted)
    missing = sum(max(0, count - available[char]) for char, count in needed.items())
    if missing:
        return f"No {missing}"
    return f"Yes {len(shop) - len(wanted)}"


def earth_to_mars(number: int) -> str:
    """Write a number below 169 in Martian."""
    if not 0 <= number < MARS_LIMIT:
        raise ValueError(f"number must lie between 0 and {MARS_LIMIT - 1}")
    high, low = divmod(number, 13)
    if high == 0:
        return MARS_LOW[low]
    if low == 0:
        return MARS_HIGH[high]
    return f"{MARS_HIGH[high]} {MARS_LOW[low]}"


def mars_to_earth(word: str) -> int:
    """Read a Martian number of one or two words."""
    parts = word.split()
    if not parts or len(parts) > 2:
        raise ValueError(f"not a Martian number: {word!r}")
    try:
        return sum(_MARS_VALUES[part] for part in parts)
    except KeyError as error:
        raise ValueError(f"unknown Martian digit: {error.args[0]!r}") from None