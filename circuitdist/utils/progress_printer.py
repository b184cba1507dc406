import contextlib
import sys
from enum import Enum


class TermColor(Enum):
    OKGREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'


@contextlib.contextmanager
def colored_print(color: TermColor, file=None):
    if file is None:
        file = sys.stdout
    print(color.value, end='', file=file)
    try:
        yield
    finally:
        print(TermColor.ENDC.value, end='', file=file)


def success_print():
    return colored_print(TermColor.OKGREEN)


def warn_print():
    return colored_print(TermColor.WARNING)


def fail_print():
    return colored_print(TermColor.FAIL, file=sys.stderr)
