import pytest

from docintel.summarization.extractive import ExtractiveSummarizer
from docintel.summarization.tfidf import TfidfSummarizer

REPORT_SENTENCES = [
    "The quarterly report covers the northern corridor",
    "Passenger numbers grew steadily across all lines",
    "Emergency procedure training is critical for staff",
    "Ticket machines were upgraded at two stations",
    "The board will meet again next quarter",
]
REPORT = ". ".join(REPORT_SENTENCES) + "."

FILLER = "we ate the pie and the jam too"


class TestExtractiveSummarizer:
    def test_short_text_is_returned_verbatim(self) -> None:
        result = ExtractiveSummarizer().summarize("Brief note.")
        assert result.summary == "Brief note."
        assert result.confidence == 0.8
        assert result.compression_ratio == 1.0
        assert result.model == "fast-fallback"

    def test_text_without_sentences_is_snipped(self) -> None:
        text = "Go now. " * 15
        result = ExtractiveSummarizer().summarize(text)
        assert result.summary.endswith("...")
        assert result.summary.startswith("Go now. Go now.")
        assert result.confidence == 0.8

    def test_picks_two_best_sentences_in_score_order(self) -> None:
        result = ExtractiveSummarizer().summarize(REPORT)
        # Keyword-heavy sentence (17) beats the opening sentence (15).
        assert result.summary == (
            "Emergency procedure training is critical for staff. "
            "The quarterly report covers the northern corridor."
        )
        assert result.confidence == 0.75
        assert result.original_word_count == len(REPORT.split())
        assert result.word_count == 14
        assert result.compression_ratio == pytest.approx(14 / len(REPORT.split()))


class TestTfidfSummarizer:
    def test_keeps_single_best_sentence_for_short_documents(self) -> None:
        text = (
            "The depot canteen serves lunch daily. "
            "Emergency hazard procedure must be followed on the track. "
            "Parking permits are renewed each spring. "
            "Visitors sign the register at reception."
        )
        result = TfidfSummarizer().summarize(text)
        assert result.summary == "Emergency hazard procedure must be followed on the track."
        assert result.model == "fallback-extractive"
        assert result.confidence == 0.7

    def test_returns_top_three_in_document_order(self) -> None:
        sentences = [FILLER] * 10
        sentences[7] = "Urgent hazard near the north gate"
        sentences[2] = "Critical risk reported by the night crew"
        sentences[5] = "Compliance deadline for brake overhaul"
        result = TfidfSummarizer().summarize(". ".join(sentences) + ".")
        assert result.summary == (
            "Critical risk reported by the night crew. "
            "Compliance deadline for brake overhaul. "
            "Urgent hazard near the north gate."
        )

    def test_text_without_sentences_is_snipped(self) -> None:
        result = TfidfSummarizer().summarize("Go now. " * 60)
        assert result.summary.endswith("...")
        assert len(result.summary) == 203
        assert result.compression_ratio < 1.0

    def test_blank_text_gives_empty_summary(self) -> None:
        assert TfidfSummarizer().summarize("   ").summary == ""


MALAYALAM_NOTICE = "കൊച്ചി മെട്രോ സ്റ്റേഷനിൽ സുരക്ഷാ പരിശോധന നടത്തി. " * 6


class TestSummaryBounds:
    @pytest.mark.parametrize("summarizer", [ExtractiveSummarizer(), TfidfSummarizer()], ids=["extractive", "tfidf"])
    @pytest.mark.parametrize(
        "text",
        [REPORT, "Go now. " * 60, MALAYALAM_NOTICE, REPORT * 4000],
        ids=["report", "no-sentences", "malayalam", "very-long"],
    )
    def test_long_input_gives_non_empty_compressed_summary(
        self, summarizer: ExtractiveSummarizer | TfidfSummarizer, text: str
    ) -> None:
        assert len(text) > 100
        result = summarizer.summarize(text)
        assert result.summary
        assert result.compression_ratio <= 1.0
