"""Algorithms over whitespace-separated words and path lists."""

from __future__ import annotations

from collections import Counter, deque
from typing import Iterable

__all__ = ["are_sentences_similar", "uncommon_from_sentences", "remove_subfolders"]


def are_sentences_similar(s1: str, s2: str) -> bool:
    """Tell whether one sentence becomes the other by inserting a run of words."""
    if len(s1) < len(s2):
        s1, s2 = s2, s1
    longer = deque(s1.split())
    shorter = deque(s2.split())
    while longer and shorter and longer[0] == shorter[0]:
        longer.popleft()
        shorter.popleft()
    while longer and shorter and longer[-1] == shorter[-1]:
        longer.pop()
        shorter.pop()
    return not shorter


def _words(sentence: str) -> list[str]:
    parts = sentence.split(" ")
    if parts[-1] == "":
        parts.pop()
    return parts


def uncommon_from_sentences(s1: str, s2: str) -> list[str]:
    """Words that occur exactly once across both sentences, in order of appearance."""
    counts = Counter(_words(s1))
    counts.update(_words(s2))
    return [word for word, count in counts.items() if count == 1]


def remove_subfolders(folder: Iterable[str]) -> list[str]:
    """Keep only the folders that are not inside another listed folder, sorted."""
    kept: list[str] = []
    for path in sorted(folder):
        if not kept or not path.startswith(kept[-1] + "/"):
            kept.append(path)
    return kept