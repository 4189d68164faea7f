import logging
import re

from guessing_game.errors import GuessingGameError

logger = logging.getLogger(__name__)

# largest value an unsigned 32 bit guess can hold
MAX_GUESS = 2**32 - 1

DIGITS = re.compile(r"\+?[0-9]+")


class ParseError(GuessingGameError, ValueError):
    pass


def parse_guess(raw_line: str) -> int:
    """
    Parse one line of player input into a guess.

    Surrounding whitespace is ignored. Only plain base-10 digits (with an
    optional leading "+") are accepted, and the value must fit in
    `MAX_GUESS`.

    Raises:
    - ParseError: the line is empty, not a number, negative or too large.
    """
    text = raw_line.strip()
    if not DIGITS.fullmatch(text):
        raise ParseError(f"not a non-negative integer: {text!r}")
    digits = text.lstrip("+").lstrip("0")
    if len(digits) > len(str(MAX_GUESS)):
        raise ParseError(f"{len(digits)}-digit guess is larger than {MAX_GUESS}")
    guess = int(digits or "0")
    if guess > MAX_GUESS:
        raise ParseError(f"guess {guess} is larger than {MAX_GUESS}")
    logger.debug(f"parse_guess - {guess=}")
    return guess
