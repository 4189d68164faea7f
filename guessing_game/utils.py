SECRET_MIN = 1
SECRET_MAX = 100
LOG_FILE = "/tmp/guessing_game.log"


def render_text(text):
    """Function to write a line of game output to the console."""
    print(text, flush=True)


def prompt_user_input(text):
    return input(text)
