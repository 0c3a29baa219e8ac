"""
ranker.py - Grouped Frequency Ranking

Orders (count, token) pairs by count descending and, inside each group of
equal counts ("tier"), by token ascending.

The list is first sorted on count alone. Tiers are then located by walking
the distinct counts from highest to lowest with a cursor that only moves
forward, and each tier is sorted by token in place.
"""

from collections import namedtuple

from utils import get_logger


RankedEntry = namedtuple("RankedEntry", ["count", "token"])


class RankingConsistencyError(RuntimeError):
    """A distinct count has no matching entries in the ranked list."""


def _get_count(entry):
    return entry.count


def _get_token(entry):
    return entry.token


def flip_entries(frequencies):
    """Turn {token: count} into a list of RankedEntry(count, token)."""
    return [RankedEntry(count, token) for token, count in frequencies.items()]


def collect_distinct_counts(entries):
    """Ascending list of the distinct count values found in entries."""
    return sorted({entry.count for entry in entries})


def sort_tiers(entries, distinct_counts):
    """
    Sort each equal-count run of a count-descending list by token, in place.

    Runtime Complexity: O(n + sum(k log k))
    where n is len(entries) and k the size of each tier. The cursor
    never moves backwards so tier boundaries are found in one pass.

    Args:
        entries: RankedEntry list already sorted by count descending
        distinct_counts: Ascending distinct counts present in entries

    Returns:
        (check_count, tiers_found): lookups attempted, tiers sorted

    Raises:
        RankingConsistencyError: If a count cannot be located
    """
    very_end = len(entries)
    current = 0
    check_count = 0
    tiers_found = 0

    for n in reversed(distinct_counts):
        check_count += 1
        while current < very_end and entries[current].count != n:
            current += 1
        if current == very_end:
            raise RankingConsistencyError(
                f"Count {n} has no entries in the ranked list "
                f"(checked {check_count}, found {tiers_found})")

        tier_end = current
        while tier_end < very_end and entries[tier_end].count == n:
            tier_end += 1
        entries[current:tier_end] = sorted(entries[current:tier_end], key=_get_token)
        current = tier_end
        tiers_found += 1

    return check_count, tiers_found


class RankStats(object):
    """Counters describing the last ranking run."""

    def __init__(self, distinct_counts=(), check_count=0, tiers_found=0):
        self.distinct_counts = list(distinct_counts)
        self.check_count = check_count
        self.tiers_found = tiers_found

    @property
    def set_count(self):
        return len(self.distinct_counts)

    def as_dict(self):
        return {
            "distinct_counts": sorted(self.distinct_counts, reverse=True),
            "set_count": self.set_count,
            "check_count": self.check_count,
            "tiers_found": self.tiers_found,
        }


class GroupedRanker(object):
    """
    Builds the ranked list from a frequency map and keeps the counters of
    the last run in self.stats.
    """

    def __init__(self):
        self.logger = get_logger("RANKER")
        self.stats = RankStats()

    def rank(self, frequencies):
        """
        Runtime Complexity: O(n log n) where n is the number of distinct tokens.

        Args:
            frequencies: dict mapping token -> count

        Returns:
            list of RankedEntry, count descending then token ascending
        """
        entries = flip_entries(frequencies)
        distinct_counts = collect_distinct_counts(entries)

        # coarse pass: groups equal counts together, token order still arbitrary
        entries.sort(key=_get_count, reverse=True)

        check_count, tiers_found = sort_tiers(entries, distinct_counts)
        self.stats = RankStats(distinct_counts, check_count, tiers_found)

        self.logger.info(
            f"Ranked {len(entries)} distinct tokens in {tiers_found} tiers.")
        self.logger.debug(
            f"set count: {self.stats.set_count}, check count: {check_count}, "
            f"sub range count: {tiers_found}")
        return entries
