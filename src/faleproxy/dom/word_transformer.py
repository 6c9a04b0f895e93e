# src/faleproxy/dom/word_transformer.py
import logging
import re
from enum import Enum

from ..model import WordRule

logger = logging.getLogger(__name__)


class CasingPattern(str, Enum):
    """Letter-casing shape of a matched token."""
    ALL_UPPER = "all_upper"
    CAPITALIZED = "capitalized"
    OTHER = "other"


def classify_casing(token: str) -> CasingPattern:
    """
    Classifies a token as ALL_UPPER ("YALE"), CAPITALIZED ("Yale")
    or OTHER (anything else, including "yale" and "yAlE").
    """
    if token and token == token.upper() and token != token.lower():
        return CasingPattern.ALL_UPPER

    head, rest = token[:1], token[1:]
    if head and head == head.upper() and head != head.lower() and rest == rest.lower():
        return CasingPattern.CAPITALIZED

    return CasingPattern.OTHER


def apply_casing(word: str, pattern: CasingPattern) -> str:
    """Renders `word` in the given casing pattern."""
    if pattern is CasingPattern.ALL_UPPER:
        return word.upper()
    if pattern is CasingPattern.CAPITALIZED:
        return word[:1].upper() + word[1:].lower()
    return word.lower()


class WordTransformer:
    """
    Replaces whole-word, case-insensitive occurrences of a target word
    with a replacement word, mirroring the casing of every match.

    Casing is decided per match, so "YALE" and "yale" inside the same
    string map to "FALE" and "fale" respectively.
    """

    def __init__(self, rule: WordRule):
        self.rule = rule
        self._pattern = re.compile(rf"\b{re.escape(rule.target)}\b", re.IGNORECASE)

    def _replace(self, match: re.Match) -> str:
        return apply_casing(self.rule.replacement, classify_casing(match.group(0)))

    def transform(self, text: str) -> str:
        if not text:
            return text
        return self._pattern.sub(self._replace, text)

