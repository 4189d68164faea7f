class GuessingGameError(Exception):
    pass


class InputStreamError(GuessingGameError, OSError):
    """Standard input was closed or could not be read."""
