"""
Phrase matching shared by the scoring stages.

Phrases match by substring containment. Single-word phrases of up to
``whole_word_max`` characters (ceo, coo, vp, dtc) only match as whole words,
so "coordinator" does not read as "coo". Tables compiled with
``whole_word=True`` match every phrase as whole words.
"""

import re
from typing import Iterable, Optional, Tuple

PhraseTable = Tuple[Tuple[str, "re.Pattern[str]"], ...]

_WORD_BOUNDED = r"(?<![a-z0-9]){}(?![a-z0-9])"


def compile_phrases(
    phrases: Iterable[str],
    whole_word_max: int = 3,
    whole_word: bool = False,
) -> PhraseTable:
    """Pre-compile an ordered phrase list into (phrase, regex) pairs"""
    compiled = []
    for phrase in phrases:
        escaped = re.escape(phrase)
        if whole_word or (" " not in phrase and len(phrase) <= whole_word_max):
            escaped = _WORD_BOUNDED.format(escaped)
        compiled.append((phrase, re.compile(escaped)))
    return tuple(compiled)


def first_match(text: str, table: PhraseTable) -> Optional[str]:
    """Return the first phrase of ``table`` found in ``text``, in table order"""
    if not text:
        return None
    for phrase, regex in table:
        if regex.search(text):
            return phrase
    return None


def normalize(value: Optional[str]) -> str:
    """Lower-case and trim; absent values become the empty string"""
    return (value or "").strip().lower()
