"""
wordrank/__init__.py - Pipeline Orchestrator

Runs the stages in one forward pass:
- tokenize the input stream
- count token occurrences
- rank by count descending, token ascending within each count
- report the ranked lines (and optional diagnostics)
"""

from utils import get_logger
from wordrank.tokenizer import tokenize, get_predicate
from wordrank.counter import compute_word_frequencies
from wordrank.ranker import GroupedRanker, RankedEntry, RankingConsistencyError
from wordrank.reporter import Reporter
from wordrank.source import FORMATS


def check_config(config):
    """
    Reject a config naming an unknown tokenizer variant or input format.

    Raises:
        ValueError: With the offending name and the accepted ones
    """
    get_predicate(config.variant)
    if config.input_format not in FORMATS:
        raise ValueError(
            f"Unknown input format {config.input_format!r}, "
            f"expected one of {list(FORMATS)}")
    return config


class RankResult(object):
    """Everything one run produced, handed to the reporter."""

    def __init__(self, tokens, frequencies, entries, stats):
        self.tokens = tokens
        self.frequencies = frequencies
        self.entries = entries
        self.stats = stats


class WordRank(object):
    """
    Word frequency ranking pipeline.

    Holds the run settings and wires tokenizer, counter, ranker and
    reporter together. Stages never reference earlier ones.
    """

    def __init__(self, config, ranker_factory=GroupedRanker, reporter_factory=Reporter):
        """
        Args:
            config: Configuration object (variant, diagnostics, report_file)
            ranker_factory: Factory for the ranker (for testing)
            reporter_factory: Factory for the reporter (for testing)
        """
        self.config = check_config(config)
        self.logger = get_logger("WORDRANK")
        self.ranker_factory = ranker_factory
        self.reporter_factory = reporter_factory

    def rank(self, stream):
        """
        Tokenize and rank a text stream without writing anything.

        Raises:
            RankingConsistencyError: If ranking detects inconsistent tiers
        """
        # the full token list is needed for counting and for the vocabulary dump
        tokens = list(tokenize(stream, self.config.variant))
        frequencies = compute_word_frequencies(tokens)
        self.logger.info(
            f"Read {len(tokens)} tokens, {len(frequencies)} distinct "
            f"({self.config.variant} words).")

        ranker = self.ranker_factory()
        entries = ranker.rank(frequencies)
        return RankResult(tokens, frequencies, entries, ranker.stats)

    def run(self, stream, results, diagnostics=None):
        """
        Rank a stream and write the report.

        Args:
            stream: Iterable of text lines
            results: Sink for "<count>: <token>" lines
            diagnostics: Sink for debug output; used only when enabled in config
        """
        result = self.rank(stream)

        reporter = self.reporter_factory(
            results, diagnostics if self.config.diagnostics else None)
        reporter.write_ranked(result.entries)
        reporter.write_diagnostics(result.stats, result.tokens)

        if self.config.report_file:
            reporter.write_json_report(
                self.config.report_file, result.entries, result.stats, result.tokens)
            self.logger.info(f"Wrote report to {self.config.report_file}.")
        return result


__all__ = [
    "WordRank",
    "check_config",
    "RankResult",
    "RankedEntry",
    "RankingConsistencyError",
]
