"""
Term masking engine.

Normalises sensitive terms, builds a boundary-aware matcher per term and
masks every standalone occurrence with a run of ``*`` of the term's length.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Iterable

logger = logging.getLogger(__name__)

MASK_CHAR = "*"

# letters / digits / underscore, ASCII only
_WORD_CHARS = "A-Za-z0-9_"
_WORD_ONLY_RE = re.compile(rf"[{_WORD_CHARS}]+")

# pure words: conventional \b … \b
_WORD_BOUNDARY = r"\b"

# phrases / symbols: start of text or a non-word char on the left,
# end of text or a non-word char on the right
_EDGE_PREFIX = rf"(?<![{_WORD_CHARS}])"
_EDGE_SUFFIX = rf"(?![{_WORD_CHARS}])"


class InvalidTerm(ValueError):
    """Raised when a term is missing or blank."""


class TermKind(str, Enum):
    ATOMIC = "atomic"
    COMPOUND = "compound"


def normalize_term(raw: str | None) -> str:
    """
    Validate that *raw* is present and not blank, then trim and lower-case it.
    """
    if raw is None:
        raise InvalidTerm("Word must not be null")
    if not isinstance(raw, str):
        raise InvalidTerm(f"Word must be a string, got {type(raw).__name__}")
    trimmed = raw.strip()
    if not trimmed:
        raise InvalidTerm("Word must not be blank")
    return trimmed.lower()


def classify_term(term: str) -> TermKind:
    """ATOMIC when the term is one lexical word, COMPOUND otherwise."""
    if _WORD_ONLY_RE.fullmatch(term):
        return TermKind.ATOMIC
    return TermKind.COMPOUND


@dataclass(frozen=True)
class MatchSpec:
    """Compiled rule locating whole-word / whole-phrase hits of one term."""

    term: str
    kind: TermKind
    pattern: re.Pattern

    @property
    def replacement(self) -> str:
        return MASK_CHAR * len(self.term)

    def spans(self, text: str) -> list[tuple[int, int]]:
        """Left-to-right, non-overlapping ``(start, end)`` offsets of every hit."""
        return [m.span() for m in self.pattern.finditer(text)]

    def mask(self, text: str) -> str:
        # a callable keeps the mask literal for re.sub
        replacement = self.replacement
        return self.pattern.sub(lambda _m: replacement, text)


@lru_cache(maxsize=1024)
def build_matcher(term: str) -> MatchSpec:
    """
    Build a case-insensitive matcher for *term* that only hits exact,
    standalone occurrences.

    * ATOMIC terms ("select") are wrapped in ``\\b`` so "select" never matches
      inside "selected" or "unselect".
    * COMPOUND terms ("order by", "*", "select * from") must have a non-word
      character or a text edge on both outer sides; their own inner
      spaces/symbols are not boundaries.

    Every character of the term is escaped, so ``*``, ``(`` or ``.`` are
    matched literally.
    """
    if not term:
        raise InvalidTerm("Word must not be blank")

    kind = classify_term(term)
    quoted = re.escape(term)
    if kind is TermKind.ATOMIC:
        pattern = re.compile(
            _WORD_BOUNDARY + quoted + _WORD_BOUNDARY,
            re.IGNORECASE | re.ASCII,
        )
    else:
        pattern = re.compile(_EDGE_PREFIX + quoted + _EDGE_SUFFIX, re.IGNORECASE)
    return MatchSpec(term=term, kind=kind, pattern=pattern)


def sanitize(terms: Iterable[str] | None, text: str | None) -> str | None:
    """
    Mask every stored term found in *text*.

    Terms are applied one after another, each against the output of the
    previous one, in the order *terms* yields them. ``None`` and ``""`` are
    returned unchanged.
    """
    if not text:
        return text

    result = text
    seen: set[str] = set()
    for raw in terms or ():
        term = normalize_term(raw)
        if term in seen:
            continue
        seen.add(term)
        spec = build_matcher(term)
        result = spec.mask(result)

    logger.debug("Sanitized text against %d terms", len(seen))
    return result
