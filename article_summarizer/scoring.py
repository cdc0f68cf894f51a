from __future__ import annotations
from typing import List, Sequence
import numpy as np
from .datatypes import Paragraph, ScoredSentence, Sentence

DEFAULT_BUDGET_DIVISOR = 5

def score_sentences(simM: np.ndarray, sentences: Sequence[Sentence]) -> List[ScoredSentence]:
    """
    Connectivity score: the full row sum of the similarity matrix, diagonal
    included and not normalized by row length.
    """
    simM = np.asarray(simM, dtype=float)
    n = len(sentences)
    if simM.shape != (n, n):
        raise ValueError(f"similarity matrix shape {simM.shape} does not match {n} sentences")
    row_sums = simM.sum(axis=1) if n else np.zeros(0)
    return [ScoredSentence(sentence=s, score=float(row_sums[i])) for i, s in enumerate(sentences)]

def paragraph_budget(n_sentences: int, budget_divisor: int = DEFAULT_BUDGET_DIVISOR) -> int:
    """Sentences kept from a paragraph: floor(n / divisor) + 1, capped at n."""
    if n_sentences <= 0:
        return 0
    return min(n_sentences, n_sentences // budget_divisor + 1)

def select_sentences(paragraphs: Sequence[Paragraph],
                     scored: Sequence[ScoredSentence],
                     budget_divisor: int = DEFAULT_BUDGET_DIVISOR) -> List[ScoredSentence]:
    """
    Pick the highest-scoring sentences of every paragraph independently.

    Ties keep document order (sorted() is stable). The result lists
    paragraphs in order and, within a paragraph, sentences by score; the
    assembler restores document order.
    """
    by_index = {ss.global_index: ss for ss in scored}
    selected: List[ScoredSentence] = []
    for p in paragraphs:
        candidates = [by_index[s.global_index] for s in p.sentences]
        k = paragraph_budget(len(candidates), budget_divisor)
        ranked = sorted(candidates, key=lambda ss: ss.score, reverse=True)
        selected.extend(ranked[:k])
    return selected
