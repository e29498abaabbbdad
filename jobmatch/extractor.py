"""
Skill extraction from free text.

A character trie is built once over the lowercased lexicon phrases. The text
is scanned a single time: from every position that starts a word, the trie is
walked as far as the text allows and every phrase ending on a word boundary
is reported. All lexicon entries are detected independently, so "React
Native" and a standalone "React" are both found, while "Java" is never found
inside "JavaScript".
"""

import logging
import re
from functools import lru_cache
from typing import Dict, Iterator, List, Optional, Tuple

from .lexicon import SkillLexicon, default_lexicon

logger = logging.getLogger(__name__)

_WORD_CHAR = re.compile(r"\w")


class _TrieNode:
    __slots__ = ("children", "skill")

    def __init__(self):
        self.children: Dict[str, "_TrieNode"] = {}
        self.skill: Optional[str] = None


class SkillExtractor:
    """Multi-phrase matcher over a SkillLexicon."""

    def __init__(self, lexicon: Optional[SkillLexicon] = None):
        self.lexicon = lexicon if lexicon is not None else default_lexicon()
        self._root = _TrieNode()
        for skill in self.lexicon:
            node = self._root
            for char in skill.lower():
                node = node.children.setdefault(char, _TrieNode())
            node.skill = skill
        logger.debug(f"Built skill trie over {len(self.lexicon)} lexicon entries")

    def find_all(self, text: Optional[str]) -> Iterator[Tuple[int, int, str]]:
        """
        Yield every lexicon hit as (start, end, canonical_skill).

        Hits are yielded in text order; hits sharing a start position are
        yielded longest first.
        """
        if not text:
            return

        lowered = text.lower()
        length = len(lowered)
        is_word = [bool(_WORD_CHAR.match(char)) for char in lowered]

        for start in range(length):
            if start > 0 and is_word[start - 1]:
                continue

            node = self._root
            hits = []
            pos = start
            while pos < length:
                node = node.children.get(lowered[pos])
                if node is None:
                    break
                pos += 1
                if node.skill is not None and (pos == length or not is_word[pos]):
                    hits.append((start, pos, node.skill))

            yield from reversed(hits)

    def extract(self, text: Optional[str]) -> List[str]:
        """
        Return the canonical skills present in ``text``.

        Each skill appears once, in lexicon catalog order.
        """
        found = {skill for _, _, skill in self.find_all(text)}
        skills = sorted(found, key=self.lexicon.position)
        logger.debug(f"Extracted {len(skills)} skills: {skills}")
        return skills


EXTRACTOR_CACHE_SIZE = 16


@lru_cache(maxsize=EXTRACTOR_CACHE_SIZE)
def _cached_extractor(lexicon: SkillLexicon) -> SkillExtractor:
    return SkillExtractor(lexicon)


def get_extractor(lexicon: Optional[SkillLexicon] = None) -> SkillExtractor:
    """Shared extractor per lexicon instance; the least recently used tries are evicted."""
    return _cached_extractor(lexicon if lexicon is not None else default_lexicon())


def extract_skills(text: Optional[str], lexicon: Optional[SkillLexicon] = None) -> List[str]:
    """Extract canonical skill names from text using the given (or default) lexicon."""
    return get_extractor(lexicon).extract(text)
