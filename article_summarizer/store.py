from __future__ import annotations
import logging
from typing import Dict, Optional, Protocol
from .datatypes import SummaryRecord, SummaryStatus
from .summarize import TextSummarizer

logger = logging.getLogger(__name__)

class SummaryStore(Protocol):
    """Anything that can keep summaries keyed by article link."""

    def exists(self, link: str) -> bool: ...

    def get(self, link: str) -> Optional[SummaryRecord]: ...

    def save(self, record: SummaryRecord) -> SummaryRecord: ...

class InMemorySummaryStore:
    def __init__(self):
        self._records: Dict[str, SummaryRecord] = {}

    def exists(self, link: str) -> bool:
        return link in self._records

    def get(self, link: str) -> Optional[SummaryRecord]:
        return self._records.get(link)

    def save(self, record: SummaryRecord) -> SummaryRecord:
        self._records[record.link] = record
        return record

    def __len__(self) -> int:
        return len(self._records)

def normalize_url(url: Optional[str]) -> Optional[str]:
    """Drop the query string so tracking parameters don't create new keys."""
    if url is None:
        return None
    return url.split("?", 1)[0]

def process_and_save_summary(store: SummaryStore,
                             url: str,
                             text: str,
                             summarizer: Optional[TextSummarizer] = None) -> Optional[SummaryRecord]:
    """
    Summarize an article and store it under its normalized URL.

    Returns the saved record, or None when the article was already stored or
    the summarizer reported an internal error.
    """
    link = normalize_url(url)
    if store.exists(link):
        logger.debug("Summary for %s already stored, skipping", link)
        return None

    result = (summarizer or TextSummarizer()).summarize(text)
    if result.status is SummaryStatus.ERROR:
        logger.warning("Not storing summary for %s: %s", link, result.error)
        return None

    record = store.save(SummaryRecord.from_result(link, result))
    logger.info("Stored summary for %s (%d -> %d words, ratio %.2f)",
                link, record.original_word_count, record.summary_word_count,
                record.compression_ratio)
    return record
