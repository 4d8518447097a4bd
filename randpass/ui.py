# print_info, print_hint, print_warning, print_error
# (messages for the user, printed to stderr)
#

import sys
import functools

from blessed import Terminal

DEFAULT_WRAP_WIDTH = 80


@functools.lru_cache(maxsize=1)
def _terminal(stream) -> Terminal:
    # Styling is a no-op when the stream is not a terminal
    return Terminal(stream=stream)


def _print_message(label: str, color: str, text: str):
    term = _terminal(sys.stderr)
    style = getattr(term, color)
    message = f"{style(label + ':')} {term.bold(text)}"
    width = term.width or DEFAULT_WRAP_WIDTH
    print('\n'.join(term.wrap(message, width=width)), file=sys.stderr)


def print_info(text: str):
    _print_message('info', 'bold_cyan', text)


def print_hint(text: str):
    _print_message('hint', 'bold_green', text)


def print_warning(text: str):
    _print_message('warning', 'bold_yellow', text)


def print_error(text: str):
    _print_message('error', 'bold_red', text)
