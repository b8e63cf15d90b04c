# src/stats19/etl/select.py

import random

from stats19.shared.errors import AmbiguousFileError
from .files import AmbiguousResult


def phrase() -> str:
    """Generate a phrase for data download purposes."""
    txt = [
        "Happy to go",
        "Good to go",
        "Download now",
        "Wanna do it",
    ]
    return f"{random.choice(txt)} (y = enter, n = N/other)? "


def select_file(fnames, input_func=input):
    """
    Interactively select one of fnames.

    Shows a numbered menu and keeps asking until a valid number is given.
    An empty answer or 0 cancels and returns None.
    """
    fnames = list(fnames)
    print("Multiple matches. Which do you want to download?")
    for i, name in enumerate(fnames, start=1):
        print(f"{i}: {name}")

    while True:
        answer = input_func("Selection: ").strip()
        if answer in ("", "0"):
            return None
        if answer.isdigit() and 1 <= int(answer) <= len(fnames):
            return fnames[int(answer) - 1]
        print("Enter an item from the menu, or 0 to exit")


def first_match(fnames):
    fnames = list(fnames)
    return fnames[0] if fnames else None


def raise_on_ambiguous(fnames):
    fnames = list(fnames)
    if len(fnames) == 1:
        return fnames[0]
    raise AmbiguousFileError(
        f"More than one file matches, pass a stricter filename: {fnames}"
    )


def resolve_ambiguous(result, chooser=raise_on_ambiguous):
    """Let chooser pick when result is an AmbiguousResult, else pass it through."""
    if isinstance(result, AmbiguousResult):
        return chooser(result.candidates)
    return result
