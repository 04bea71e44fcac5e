"""Sentence and word statistics for plain text."""
from __future__ import annotations

import re
from typing import List, Optional

from common.errors import EmptyInputError
from common.models import TERMINAL_CHARACTERS, AnalysisResult, SentenceType

# Zero-width split right after a terminal character; trailing whitespace is the separator.
_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s*")


def split_sentences(text: str) -> List[str]:
    """Return the fully punctuated fragments of ``text`` in order.

    Fragments without a terminal character (a dangling trailing clause) are dropped.
    """

    fragments: List[str] = []
    for raw in _SENTENCE_BOUNDARY.split(text.strip()):
        fragment = raw.strip()
        if fragment and fragment[-1] in TERMINAL_CHARACTERS:
            fragments.append(fragment)
    return fragments


def count_words(text: str) -> int:
    return len(text.split())


def classify_sentence(fragment: str) -> Optional[SentenceType]:
    fragment = fragment.rstrip()
    if not fragment or fragment[-1] not in TERMINAL_CHARACTERS:
        return None
    return SentenceType(fragment[-1])


def analyze(text: str) -> AnalysisResult:
    """Count sentences by type and words in ``text``.

    Raises EmptyInputError when the text is blank after trimming.
    """

    trimmed = text.strip()
    if not trimmed:
        raise EmptyInputError()

    counts = {kind: 0 for kind in SentenceType}
    for fragment in split_sentences(trimmed):
        kind = classify_sentence(fragment)
        if kind is not None:
            counts[kind] += 1

    return AnalysisResult(
        sentence_count=sum(counts.values()),
        word_count=count_words(trimmed),
        declarative_count=counts[SentenceType.DECLARATIVE],
        question_count=counts[SentenceType.QUESTION],
        exclamatory_count=counts[SentenceType.EXCLAMATORY],
    )
