"""
Console prompts and state banners.

Every function takes the line reader and writer it should use, so the
console sessions can be driven by scripted input in tests. EOFError from the
reader is left to propagate.
"""

from __future__ import annotations

from collections.abc import Callable

from indigo.engine.deck import Deck

ReadLine = Callable[[], str]
Write = Callable[[str], None]

YES_ANSWERS = frozenset({"yes"})
NO_ANSWERS = frozenset({"no"})


def ask_yes_no(question: str, read_line: ReadLine, write: Write) -> bool:
    """Ask until the answer is yes or no (any letter case)."""
    while True:
        write(question)
        answer = read_line().strip().lower()
        if answer in YES_ANSWERS:
            return True
        if answer in NO_ANSWERS:
            return False


def ask_number(
    prompt: str,
    read_line: ReadLine,
    write: Write,
    *,
    valid_range: tuple[int, int],
    allowed_range: tuple[int, int],
    invalid_message: str,
    out_of_range_message: str,
) -> int | None:
    """Read one integer and check it against two ranges.

    allowed_range is what the request may ever ask for; anything outside it
    (or not an integer) prints invalid_message. valid_range is what can be
    satisfied right now; an allowed value outside it prints
    out_of_range_message. Both cases return None and the caller decides
    whether to ask again.

    Examples:
        A deck with 3 cards left, asked for 5 of a possible 1..52:
        the answer is allowed but not valid, so out_of_range_message is shown.
    """
    write(prompt)
    raw = read_line().strip()
    try:
        value = int(raw)
    except ValueError:
        write(invalid_message)
        return None
    if not allowed_range[0] <= value <= allowed_range[1]:
        write(invalid_message)
        return None
    if not valid_range[0] <= value <= valid_range[1]:
        write(out_of_range_message)
        return None
    return value


def table_banner(table: Deck) -> str:
    """One-line summary of the table pile.

    Examples:
        >>> table_banner(Deck.default().take(4)[0])
        '4 cards on the table, and the top card is 10♣'
    """
    if table.is_empty():
        return "No cards on the table"
    return f"{table.size} cards on the table, and the top card is {table.top}"
