from enum import Enum


class Outcome(Enum):
    TooSmall = "Too small!"
    TooBig = "Too big!"
    Equal = "You win!"

    @property
    def message(self) -> str:
        return self.value

    @property
    def is_win(self) -> bool:
        return self is Outcome.Equal


def compare(guess: int, secret_number: int) -> Outcome:
    if guess < secret_number:
        return Outcome.TooSmall
    elif guess > secret_number:
        return Outcome.TooBig
    return Outcome.Equal
