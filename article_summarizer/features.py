from __future__ import annotations
import logging
from collections import Counter
from typing import List, Sequence
import numpy as np
from .datatypes import Sentence

logger = logging.getLogger(__name__)

def _word_bag(s: Sentence) -> Counter:
    return Counter(tok.lower() for tok in s.text.split())

def _common_from_bags(b1: Counter, b2: Counter) -> float:
    # every matching (word_i, word_j) pair counts, so a shared word contributes
    # count_in_i * count_in_j
    if len(b1) > len(b2):
        b1, b2 = b2, b1
    return float(sum(c * b2.get(w, 0) for w, c in b1.items()))

def common_words(s1: Sentence, s2: Sentence) -> float:
    """
    Number of case-insensitively equal (word in s1, word in s2) pairs.

    This is the size of the token cross product filtered to equal pairs, not
    a set intersection: "the cat the" vs "the" gives 2.
    """
    return _common_from_bags(_word_bag(s1), _word_bag(s2))

def build_similarity_matrix(sentences: Sequence[Sentence]) -> np.ndarray:
    """
    M[i][j] = common_words(i, j) / ((words_i + words_j) / 2)

    Only the upper triangle (diagonal included) is computed, the lower one is
    mirrored from it, so the matrix is exactly symmetric.
    """
    n = len(sentences)
    M = np.zeros((n, n), dtype=float)
    if n == 0:
        return M

    bags: List[Counter] = [_word_bag(s) for s in sentences]
    for i in range(n):
        for j in range(i, n):
            avg_len = (sentences[i].word_count + sentences[j].word_count) / 2
            if avg_len == 0:
                continue
            M[i, j] = _common_from_bags(bags[i], bags[j]) / avg_len
            if i != j:
                M[j, i] = M[i, j]

    logger.debug("Built %dx%d similarity matrix", n, n)
    return M
