"""
Tests for the summary store and article processing.
"""

from article_summarizer.datatypes import SummaryRecord, SummaryResult, SummaryStatus
from article_summarizer.store import InMemorySummaryStore, normalize_url, process_and_save_summary


class _FailingSummarizer:
    def summarize(self, text):
        return SummaryResult.failure("boom")


class TestNormalizeUrl:
    """Tests for normalize_url."""

    def test_strips_query(self):
        assert normalize_url("https://www.vg.no/nyheter/i/abc?utm_source=x&a=1") == "https://www.vg.no/nyheter/i/abc"

    def test_without_query(self):
        assert normalize_url("https://e24.no/a") == "https://e24.no/a"

    def test_none(self):
        assert normalize_url(None) is None


class TestInMemorySummaryStore:
    """Tests for InMemorySummaryStore."""

    def test_save_and_lookup(self):
        store = InMemorySummaryStore()
        record = SummaryRecord.from_result("https://nrk.no/a", SummaryResult("Sum.", 10, 1, 0.1))

        assert store.save(record) is record
        assert store.exists("https://nrk.no/a")
        assert store.get("https://nrk.no/a") is record
        assert len(store) == 1

    def test_missing(self):
        store = InMemorySummaryStore()

        assert not store.exists("https://nrk.no/missing")
        assert store.get("https://nrk.no/missing") is None


class TestProcessAndSaveSummary:
    """Tests for process_and_save_summary."""

    def test_saves_summary_with_stats(self, scenario_text):
        store = InMemorySummaryStore()
        record = process_and_save_summary(store, "https://nrk.no/a?ref=front", scenario_text)

        assert record.link == "https://nrk.no/a"
        assert record.summary == "Ola moved to Oslo. Per lives in Trondheim."
        assert record.original_word_count == 18
        assert record.summary_word_count == 8
        assert record.compression_ratio == 8 / 18
        assert record.created_at.tzinfo is not None
        assert store.get("https://nrk.no/a") is record

    def test_skips_already_stored_link(self, scenario_text):
        """The same article with a different query string is stored once."""
        store = InMemorySummaryStore()
        first = process_and_save_summary(store, "https://nrk.no/a?x=1", scenario_text)
        second = process_and_save_summary(store, "https://nrk.no/a?x=2", "Something else entirely.")

        assert first is not None
        assert second is None
        assert len(store) == 1
        assert store.get("https://nrk.no/a").summary == first.summary

    def test_failed_summary_not_saved(self, scenario_text):
        store = InMemorySummaryStore()
        record = process_and_save_summary(store, "https://vg.no/b", scenario_text, summarizer=_FailingSummarizer())

        assert record is None
        assert not store.exists("https://vg.no/b")

    def test_empty_article_is_saved_as_is(self):
        store = InMemorySummaryStore()
        record = process_and_save_summary(store, "https://vg.no/empty", "   ")

        assert record.summary == ""
        assert record.original_word_count == 0
        assert record.compression_ratio == 0.0
        assert SummaryResult.empty().status is SummaryStatus.EMPTY_INPUT
