"""Canonical skill matching against the alias taxonomy.

Implements whole-token alias matching: each canonical skill is reported at
most once, under its canonical tag, whichever alias was found.
"""
from __future__ import annotations

import logging
import re
from typing import Mapping

from vocab.skill_taxonomy import SKILL_DICTIONARY

logger = logging.getLogger(__name__)


def compile_alias(alias: str) -> re.Pattern:
    """Literal, whole-token pattern for one alias.

    A token must not touch word characters on either side, and a period
    glued to its front ties it to the previous word, so "js" does not occur
    in "node.js" while "react" still occurs in "react.js".
    """
    return re.compile(rf"(?<![\w.]){re.escape(alias.lower())}(?!\w)")


class SkillMatcher:
    """Matches the aliases of a skill dictionary in free text.

    Patterns are compiled once; ``extract`` keeps no state between calls and
    is safe to share across threads.
    """

    def __init__(self, dictionary: Mapping[str, tuple[str, ...]] | None = None) -> None:
        self.dictionary = dictionary if dictionary is not None else SKILL_DICTIONARY
        self._patterns: tuple[tuple[str, tuple[re.Pattern, ...]], ...] = tuple(
            (canonical, tuple(compile_alias(a) for a in aliases))
            for canonical, aliases in self.dictionary.items()
        )
        logger.debug(f"Compiled aliases for {len(self._patterns)} skills")

    def extract(self, text: str) -> frozenset[str]:
        """Return the canonical tags of every skill mentioned in ``text``."""
        if not text or not text.strip():
            return frozenset()

        text_lower = text.lower()
        found: set[str] = set()
        for canonical, patterns in self._patterns:
            for pattern in patterns:
                if pattern.search(text_lower):
                    found.add(canonical)
                    break
        return frozenset(found)


_default_matcher = SkillMatcher()


def extract_skills(text: str) -> frozenset[str]:
    """Match ``text`` against the built-in skill dictionary."""
    return _default_matcher.extract(text)
