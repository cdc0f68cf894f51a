from __future__ import annotations
import logging
import re
from typing import List, Tuple
from .datatypes import Paragraph, Sentence

logger = logging.getLogger(__name__)

SENTENCE_END = "."

# one or more blank (empty or whitespace-only) lines separate paragraphs
_BLANK_LINES_RE = re.compile(r"\n[ \t\f\v]*(?:\n[ \t\f\v]*)+")

def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")

def split_blocks(text: str) -> List[str]:
    """Split text into paragraph blocks on runs of blank lines."""
    return _BLANK_LINES_RE.split(normalize_newlines(text))

def _split_block(block: str) -> List[str]:
    # Scans the block char by char: every '.' closes the sentence in progress,
    # line breaks inside an open sentence are kept. Whatever is left at the end
    # of the block is its last sentence.
    parts: List[str] = []
    buf: List[str] = []
    for line in block.split("\n"):
        for ch in line:
            if ch != SENTENCE_END:
                buf.append(ch)
                continue
            text = "".join(buf).strip()
            if text:
                parts.append(text)
            buf = []
        if buf:
            buf.append("\n")
    tail = "".join(buf).strip()
    if tail:
        parts.append(tail)
    return parts

def extract_sentences(text: str) -> List[Sentence]:
    sentences: List[Sentence] = []
    paragraph_index = 0
    for block in split_blocks(text):
        parts = _split_block(block)
        if not parts:
            continue
        for part in parts:
            sentences.append(Sentence.from_text(len(sentences), paragraph_index, part))
        paragraph_index += 1
    return sentences

def group_into_paragraphs(sentences: List[Sentence]) -> List[Paragraph]:
    paragraphs: List[Paragraph] = []
    for s in sentences:
        if not paragraphs or paragraphs[-1].index != s.paragraph_index:
            paragraphs.append(Paragraph(index=s.paragraph_index))
        paragraphs[-1].sentences.append(s)
    return paragraphs

def segment_text(text: str) -> Tuple[List[Sentence], List[Paragraph]]:
    """
    Segment raw article text into sentences and paragraphs.

    Sentences end at '.', paragraphs are separated by blank lines. A sentence
    may span several lines; a trailing fragment without a period is kept as
    the paragraph's last sentence.
    """
    if not text or not text.strip():
        return [], []
    sentences = extract_sentences(text)
    paragraphs = group_into_paragraphs(sentences)
    logger.debug("Segmented %d chars into %d sentences in %d paragraphs",
                 len(text), len(sentences), len(paragraphs))
    return sentences, paragraphs
