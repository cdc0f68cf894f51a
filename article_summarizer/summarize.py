from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence
import numpy as np
from .datatypes import Paragraph, ScoredSentence, Sentence, SummaryResult
from .preprocessing import segment_text
from .features import build_similarity_matrix
from .scoring import DEFAULT_BUDGET_DIVISOR, score_sentences, select_sentences

logger = logging.getLogger(__name__)

@dataclass
class SummaryConfig:
    budget_divisor: int = DEFAULT_BUDGET_DIVISOR  # keep n // divisor + 1 sentences per paragraph
    terminal_punctuation: str = ".!?"
    large_document_warning: int = 500  # similarity cost is quadratic in sentences

    def __post_init__(self):
        if self.budget_divisor < 1:
            raise ValueError(f"budget_divisor must be >= 1, got {self.budget_divisor}")
        if self.large_document_warning < 1:
            raise ValueError(f"large_document_warning must be >= 1, got {self.large_document_warning}")
        if not self.terminal_punctuation:
            raise ValueError("terminal_punctuation must not be empty")

@dataclass
class SummaryTrace:
    """Intermediate values of one pipeline run."""
    sentences: List[Sentence]
    paragraphs: List[Paragraph]
    simM: np.ndarray
    scored: List[ScoredSentence] = field(default_factory=list)
    selected: List[ScoredSentence] = field(default_factory=list)
    result: Optional[SummaryResult] = None

def _word_total(items) -> int:
    return sum(s.word_count for s in items)

def assemble_summary(selected: Sequence[ScoredSentence],
                     sentences: Sequence[Sentence],
                     terminal_punctuation: str = ".!?") -> SummaryResult:
    ordered = sorted(selected, key=lambda ss: ss.global_index)
    parts = []
    for ss in ordered:
        text = ss.text.strip()
        if not text.endswith(tuple(terminal_punctuation)):
            text += "."
        parts.append(text)

    original_words = _word_total(sentences)
    summary_words = _word_total(ordered)
    ratio = summary_words / original_words if original_words > 0 else 0.0
    return SummaryResult(summary=" ".join(parts),
                         original_word_count=original_words,
                         summary_word_count=summary_words,
                         compression_ratio=ratio)

class TextSummarizer:
    """
    Paragraph-budgeted extractive summarizer.

    Holds only its config; every call builds its own sentences, matrix and
    scores, so one instance can be shared between callers.
    """

    def __init__(self, config: Optional[SummaryConfig] = None):
        self.config = config or SummaryConfig()

    def trace(self, text: str) -> SummaryTrace:
        """Run the pipeline and keep every intermediate value. May raise."""
        cfg = self.config
        sentences, paragraphs = segment_text(text or "")
        if not sentences:
            return SummaryTrace(sentences=[], paragraphs=[], simM=np.zeros((0, 0)),
                                result=SummaryResult.empty() if not (text or "").strip()
                                else SummaryResult.no_sentences())

        if len(sentences) > cfg.large_document_warning:
            logger.warning("Summarizing %d sentences; similarity matrix cost grows quadratically",
                           len(sentences))

        simM = build_similarity_matrix(sentences)
        scored = score_sentences(simM, sentences)
        selected = select_sentences(paragraphs, scored, budget_divisor=cfg.budget_divisor)
        result = assemble_summary(selected, sentences, terminal_punctuation=cfg.terminal_punctuation)
        logger.debug("Selected %d of %d sentences (%d -> %d words)",
                     len(selected), len(sentences),
                     result.original_word_count, result.summary_word_count)
        return SummaryTrace(sentences=sentences, paragraphs=paragraphs, simM=simM,
                            scored=scored, selected=selected, result=result)

    def summarize(self, text: Optional[str]) -> SummaryResult:
        """Summarize text. Never raises: failures come back as status ERROR."""
        try:
            if text is None or not text.strip():
                return SummaryResult.empty()
            return self.trace(text).result
        except Exception as e:
            logger.exception("Summary generation failed")
            return SummaryResult.failure(str(e) or type(e).__name__)

def summarize(text: Optional[str], config: Optional[SummaryConfig] = None) -> SummaryResult:
    # Pipeline glue
    return TextSummarizer(config).summarize(text)
