"""Compile per-language keyword lists into case-insensitive regex patterns.

English and Spanish keywords are anchored on word boundaries so "error" does not
match inside "terrorized". Korean, Japanese and Chinese do not separate words
with spaces, so their keywords match as plain substrings.
"""
import re
from dataclasses import dataclass

from skillscout.skills.types import uses_word_boundary

_WHITESPACE = re.compile(r"\s+")
# Zero or more: Korean spacing is inconsistent ("안 돼" vs "안돼").
_FLEXIBLE_WHITESPACE = r"\s*"


def keyword_to_regex(keyword: str) -> str:
    """Escape a keyword literally, turning inner whitespace runs into a flexible matcher."""
    parts = _WHITESPACE.split(keyword.strip())
    return _FLEXIBLE_WHITESPACE.join(re.escape(p) for p in parts if p)


@dataclass(frozen=True)
class KeywordPattern:
    """One compiled alternation for a (concept, language) pair.

    Each keyword is wrapped in its own named group so a match can be traced back
    to the keyword as declared in the registry.
    """

    concept: str
    language: str
    keywords: tuple[str, ...]
    regex: re.Pattern

    @property
    def source(self) -> str:
        return self.regex.pattern

    def search(self, text: str) -> bool:
        return self.regex.search(text) is not None

    def matched_keywords(self, text: str) -> list[str]:
        """Return every declared keyword found in text, in first-occurrence order, without repeats."""
        found: list[str] = []
        for m in self.regex.finditer(text):
            keyword = self.keywords[int(m.lastgroup[1:])]
            if keyword not in found:
                found.append(keyword)
        return found


def compile_pattern(keywords: list[str] | tuple[str, ...], language: str, concept: str = "") -> KeywordPattern:
    """Compile keywords for one language into a single KeywordPattern.

    Raises ValueError if no non-blank keyword is given.
    """
    kept = tuple(k for k in keywords if k and k.strip())
    if not kept:
        raise ValueError(f"No keywords to compile for concept {concept!r} ({language})")
    alternation = "|".join(f"(?P<k{i}>{keyword_to_regex(k)})" for i, k in enumerate(kept))
    if uses_word_boundary(language):
        source = rf"\b(?:{alternation})\b"
    else:
        source = f"(?:{alternation})"
    return KeywordPattern(
        concept=concept,
        language=language,
        keywords=kept,
        regex=re.compile(source, re.IGNORECASE),
    )
