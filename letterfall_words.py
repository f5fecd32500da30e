
"""Dictionary and word matching over board rows and columns"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional, Sequence, Tuple

from letterfall_board import Board, Cell, CellKind, board_height, board_width
from letterfall_letters import ALPHABET, WILDCARD_CHAR

logger = logging.getLogger(__name__)

MIN_WORD_LENGTH = 3

HORIZONTAL = "horizontal"
VERTICAL = "vertical"

# Used when no word list can be loaded
FALLBACK_WORDS = {
    "THE", "AND", "FOR", "ARE", "BUT", "NOT", "YOU", "ALL", "CAN", "HER",
    "WAS", "ONE", "OUR", "OUT", "DAY", "GET", "HAS", "HIM", "HIS", "HOW",
    "ITS", "MAY", "NEW", "NOW", "OLD", "SEE", "TWO", "WAY", "WHO", "BOY",
    "DID", "LET", "PUT", "SAY", "SHE", "TOO", "USE", "MAN", "GOT",
    "BAD", "BIG", "CAT", "DOG", "EAR", "EYE", "FAR", "FUN", "GUN", "HAD",
    "JOB", "KEY", "LAW", "LOT", "MAP", "NET", "OIL", "PAN", "RED", "RUN",
    "SUN", "TAX", "TOP", "VAN", "WAR", "WIN", "YES", "ZOO", "ACE", "AGE",
    "ARM", "ART", "BAG", "BAR", "BAT", "BED", "BEE", "BOX", "BUS", "CAR",
    "COW", "CUP", "EGG", "END", "FAN", "FLY", "FOX", "GAS", "HAT", "ICE",
    "JAM", "JOY", "KID", "LEG", "LIP", "MOM", "MUD", "NUT", "PEN", "PIG",
    "RAT", "SEA", "SKY", "TEA", "TOY", "TREE", "WORD", "GAME", "PLAY", "TIME",
}


class Dictionary:
    """Uppercase word set with a prefix index for wildcard search."""

    def __init__(self, words: Optional[Iterable[str]] = None):
        source = FALLBACK_WORDS if words is None else words
        self._words: FrozenSet[str] = frozenset(w.strip().upper() for w in source if w.strip())
        self._prefixes: FrozenSet[str] = frozenset(
            w[:i] for w in self._words for i in range(1, len(w) + 1)
        )

    def __contains__(self, word: str) -> bool:
        return self.is_valid(word)

    def __len__(self) -> int:
        return len(self._words)

    def is_valid(self, word: str) -> bool:
        return len(word) >= MIN_WORD_LENGTH and word.upper() in self._words

    def has_prefix(self, prefix: str) -> bool:
        return prefix.upper() in self._prefixes


def load_dictionary(path: Optional[str] = None) -> Dictionary:
    """Read one word per line; fall back to the built-in list if that fails."""
    if path is None:
        logger.info("No dictionary path configured, using %d fallback words", len(FALLBACK_WORDS))
        return Dictionary()
    try:
        with open(path, encoding="utf-8") as fh:
            words = [line.strip() for line in fh if line.strip()]
    except OSError as exc:
        logger.warning("Failed to load dictionary from %s (%s), using fallback", path, exc)
        return Dictionary()
    if not words:
        logger.warning("Dictionary %s is empty, using fallback", path)
        return Dictionary()
    logger.info("Dictionary loaded from %s with %d words", path, len(words))
    return Dictionary(words)


@dataclass(frozen=True)
class WordMatch:
    word: str
    cells: Tuple[Tuple[int, int], ...]
    direction: str
    length: int
    has_wildcard: bool


def resolve_wildcards(text: str, dictionary: Dictionary) -> Optional[str]:
    """
    Replace each '?' with a letter so the result is a dictionary word.

    Wildcards are filled left to right, each trying A..Z in order, and the
    first complete word found wins. Branches whose prefix starts no word are
    skipped, which never changes which word is found first.
    """
    if WILDCARD_CHAR not in text:
        return text if dictionary.is_valid(text) else None

    chars = list(text.upper())

    def search(start: int) -> Optional[str]:
        try:
            idx = chars.index(WILDCARD_CHAR, start)
        except ValueError:
            word = "".join(chars)
            return word if dictionary.is_valid(word) else None
        for letter in ALPHABET:
            chars[idx] = letter
            if dictionary.has_prefix("".join(chars[:idx + 1])):
                found = search(idx + 1)
                if found:
                    return found
        chars[idx] = WILDCARD_CHAR
        return None

    return search(0)


def _carries_letter(cell: Cell) -> bool:
    return cell.kind in (CellKind.LETTER, CellKind.JUNK, CellKind.WILD)


def _cell_text(cell: Cell) -> str:
    if cell.kind is CellKind.WILD:
        return WILDCARD_CHAR
    return (cell.ch or "").upper()


def find_words_in_line(line: Sequence[Cell], index: int, direction: str,
                       dictionary: Dictionary) -> List[WordMatch]:
    """Matches among the maximal letter runs of one row or column."""
    matches: List[WordMatch] = []
    pos = 0
    while pos < len(line):
        if not _carries_letter(line[pos]):
            pos += 1
            continue
        start = pos
        while pos < len(line) and _carries_letter(line[pos]):
            pos += 1
        run = line[start:pos]
        if len(run) < MIN_WORD_LENGTH:
            continue
        text = "".join(_cell_text(cell) for cell in run)
        word = resolve_wildcards(text, dictionary)
        if word is None:
            continue
        if direction == HORIZONTAL:
            cells = tuple((index, start + i) for i in range(len(run)))
        else:
            cells = tuple((start + i, index) for i in range(len(run)))
        matches.append(WordMatch(word, cells, direction, len(run), WILDCARD_CHAR in text))
    return matches


def find_words(board: Board, dictionary: Dictionary) -> List[WordMatch]:
    """All row matches top to bottom, then all column matches left to right."""
    words: List[WordMatch] = []
    for r in range(board_height(board)):
        words.extend(find_words_in_line(board[r], r, HORIZONTAL, dictionary))
    for c in range(board_width(board)):
        column = [board[r][c] for r in range(board_height(board))]
        words.extend(find_words_in_line(column, c, VERTICAL, dictionary))
    for match in words:
        logger.debug("%s: %r at %s", match.direction, match.word, match.cells)
    return words
