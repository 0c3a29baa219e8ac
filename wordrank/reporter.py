"""
reporter.py - Result Output

Writes the ranked list as "<count>: <token>" lines. Diagnostics (distinct
counts, tier counters, vocabulary) go to a separate sink so they never mix
with the results.
"""

import json


def vocabulary(tokens):
    """Distinct tokens in ascending order."""
    return sorted(set(tokens))


def format_entry(entry):
    return f"{entry.count}: {entry.token}\n"


class Reporter(object):
    """
    Args:
        results: Writable text stream for the ranked lines
        diagnostics: Writable text stream for debug output, or None to skip it
    """

    def __init__(self, results, diagnostics=None):
        self.results = results
        self.diagnostics = diagnostics

    def write_ranked(self, entries):
        """Runtime Complexity: O(n), one line per ranked entry."""
        for entry in entries:
            self.results.write(format_entry(entry))

    def write_diagnostics(self, stats, tokens):
        if self.diagnostics is None:
            return
        out = self.diagnostics

        out.write("\nDEBUG: distinct counts\n")
        for n in reversed(stats.distinct_counts):
            out.write(f"{n}\n")

        out.write(
            f"\nDEBUG: set count: {stats.set_count}, "
            f"check count: {stats.check_count}, "
            f"sub range count: {stats.tiers_found}\n")

        out.write("\nDEBUG: vocabulary\n")
        for token in vocabulary(tokens):
            out.write(f"{token}\n")

    def write_json_report(self, path, entries, stats, tokens):
        """Write the ranked entries and run counters as JSON to path."""
        data = {
            "total_tokens": len(tokens),
            "distinct_tokens": len(entries),
            "ranked": [{"count": e.count, "token": e.token} for e in entries],
            "stats": stats.as_dict(),
        }
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
