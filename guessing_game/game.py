import logging
import random
import sys
from enum import Enum
from logging.handlers import RotatingFileHandler

from guessing_game.errors import InputStreamError
from guessing_game.guess import ParseError, parse_guess
from guessing_game.outcome import Outcome, compare
from guessing_game.utils import (
    LOG_FILE,
    SECRET_MAX,
    SECRET_MIN,
    prompt_user_input,
    render_text,
)

logger = logging.getLogger("guessing_game.game")

PROMPT = "Please input your guess.\n"


class GameState(Enum):
    AwaitingGuess = "awaiting guess"
    Won = "won"


class Game:
    def __init__(self, logs=False):
        setup_logger(logs=logs)
        self.state = GameState.AwaitingGuess
        self.secret_number = None
        self.initialize()

    def initialize(self):
        render_text("Guess the number!")
        self.secret_number = random.randint(SECRET_MIN, SECRET_MAX)
        logger.debug(f"Game.initialize - {self.secret_number=}")
        render_text(f"The secret number is: {self.secret_number}")

    def prompt_and_read(self) -> str:
        """Read one line of player input, without its trailing newline.

        Closed, failing or undecodable stdin is fatal: InputStreamError.
        """
        try:
            return prompt_user_input(PROMPT)
        except (EOFError, OSError, UnicodeDecodeError) as e:
            reason = str(e) or "end of input"
            raise InputStreamError(f"Failed to read line: {reason}") from e

    def report(self, outcome: Outcome) -> bool:
        render_text(outcome.message)
        if outcome.is_win:
            self.state = GameState.Won
        return outcome.is_win

    def run(self):
        while self.state is GameState.AwaitingGuess:
            raw_line = self.prompt_and_read()
            try:
                guess = parse_guess(raw_line)
            except ParseError as e:
                logger.debug(f"Game.run - ignoring input: {e}")
                continue
            render_text(f"You guessed: {guess}")
            outcome = compare(guess, self.secret_number)
            logger.debug(f"{guess=}, {outcome=}")
            self.report(outcome)
        logger.info(f"Game won, the secret number was {self.secret_number}")


def run(logs=False):
    try:
        Game(logs=logs).run()
    except InputStreamError as e:
        logger.error(f"Game ended before a win: {e}")
        sys.exit(str(e))


def run_debug():
    run(logs=True)


def setup_logger(logs=False):
    """
    Configure the "guessing_game" logger: a rotating file log, plus stdout when
    `logs` is set. Each handler is attached at most once per process, so
    building several `Game`s does not duplicate log lines.
    """
    logger = logging.getLogger("guessing_game")
    logger.setLevel(logging.DEBUG)

    if not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        handler = RotatingFileHandler(
            LOG_FILE,
            mode="a",
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding=None,
            delay=0,
        )
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if logs and not any(type(h) is logging.StreamHandler for h in logger.handlers):
        # Console (stdout) handler
        console_handler = logging.StreamHandler(sys.stdout)
        console_formatter = logging.Formatter("%(name)s - %(levelname)s - %(message)s")
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)
    logger.info("**************** NEW SESSION STARTED ****************")

    return logger


if __name__ == "__main__":
    run()
