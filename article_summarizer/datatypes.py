from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

NO_SENTENCES_MESSAGE = "no sentences found in text"
ERROR_PREFIX = "error during summary generation: "

@dataclass(frozen=True)
class Sentence:
    global_index: int
    paragraph_index: int
    text: str
    word_count: int
    char_length: int

    @classmethod
    def from_text(cls, global_index: int, paragraph_index: int, text: str) -> "Sentence":
        text = text.strip()
        return cls(global_index=global_index,
                   paragraph_index=paragraph_index,
                   text=text,
                   word_count=len(text.split()),
                   char_length=len(text))

@dataclass(frozen=True)
class ScoredSentence:
    sentence: Sentence
    score: float

    @property
    def global_index(self) -> int:
        return self.sentence.global_index

    @property
    def paragraph_index(self) -> int:
        return self.sentence.paragraph_index

    @property
    def text(self) -> str:
        return self.sentence.text

    @property
    def word_count(self) -> int:
        return self.sentence.word_count

@dataclass
class Paragraph:
    index: int
    sentences: List[Sentence] = field(default_factory=list)

@dataclass
class Edge:
    i: int
    j: int
    weight: float  # similarity

@dataclass
class Graph:
    nodes: List[Sentence]
    edges: List[Edge]  # undirected weighted edges

class SummaryStatus(Enum):
    OK = "ok"
    EMPTY_INPUT = "empty_input"
    NO_SENTENCES = "no_sentences"
    ERROR = "error"

@dataclass(frozen=True)
class SummaryResult:
    summary: str
    original_word_count: int
    summary_word_count: int
    compression_ratio: float
    status: SummaryStatus = SummaryStatus.OK
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is SummaryStatus.OK

    @classmethod
    def empty(cls) -> "SummaryResult":
        return cls("", 0, 0, 0.0, status=SummaryStatus.EMPTY_INPUT)

    @classmethod
    def no_sentences(cls) -> "SummaryResult":
        return cls(NO_SENTENCES_MESSAGE, 0, 0, 0.0, status=SummaryStatus.NO_SENTENCES)

    @classmethod
    def failure(cls, message: str) -> "SummaryResult":
        return cls(ERROR_PREFIX + message, 0, 0, 0.0, status=SummaryStatus.ERROR, error=message)

@dataclass
class SummaryRecord:
    """A stored summary of one article, keyed by its link."""
    link: str
    summary: str
    compression_ratio: float
    original_word_count: int
    summary_word_count: int
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_result(cls, link: str, result: SummaryResult) -> "SummaryRecord":
        return cls(link=link,
                   summary=result.summary,
                   compression_ratio=result.compression_ratio,
                   original_word_count=result.original_word_count,
                   summary_word_count=result.summary_word_count)
