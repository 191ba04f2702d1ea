"""
Relevance scoring of candidate titles against a query.

The heuristic rewards, in order of preference:
- the normalized query appearing verbatim in the candidate
- most query words (longer than 3 characters) appearing in order

UHD variants ("... (4K UHD)") get a fixed bonus so that they outrank their
standard-definition twin on equal overlap.
"""

from chakram.services.titles.slug import normalize

UHD_SLUG_SUFFIX = "4k uhd"
UHD_BONUS = 0.5
STOP_WORD_MAX_LENGTH = 3


class TitleScorer:
    """
    Scores candidate titles against one query.

    The query is normalized and tokenized once at construction.

    Attributes:
        query_slug: Normalized query, used for substring matching
        query_tokens: Query words, short ones are skipped by the token path
    """

    def __init__(self, query: str) -> None:
        self.query_slug = normalize(query)
        self.query_tokens = self.query_slug.split(" ")

    def score(self, candidate_title: str) -> float:
        """
        Score `candidate_title` against the query. 0 means no match.

        A failed token match returns plain 0 even when the UHD bonus was
        granted, while a substring match keeps it. Kept for compatibility
        with the historical ranking.
        """
        if not self.query_slug or not candidate_title:
            return 0

        candidate_slug = normalize(candidate_title)

        bonus = 0.0
        if candidate_slug.endswith(UHD_SLUG_SUFFIX):
            bonus = UHD_BONUS
            candidate_slug = candidate_slug[: -len(UHD_SLUG_SUFFIX)].rstrip()

        if self.query_slug in candidate_slug:
            # Divise par la longueur du titre original, pas du slug
            return bonus + len(self.query_slug) / len(candidate_title)

        if not candidate_slug:
            return 0

        score = 0.0
        last_idx = 0
        for token in self.query_tokens:
            if len(token) <= STOP_WORD_MAX_LENGTH:
                continue

            idx = candidate_slug.find(token, last_idx)
            if idx < 0:
                continue

            last_idx = idx
            score += len(token) / len(candidate_slug)

        if score > 0:
            return bonus + score

        return 0


def score(query: str, candidate_title: str) -> float:
    """Score a single candidate. Prefer TitleScorer when ranking many."""
    return TitleScorer(query).score(candidate_title)
