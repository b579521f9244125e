# services/scoring_service.py
import logging

from config import NO_AREA
from exceptions import DataIntegrityError
from models.catalog import ScoringPair
from models.result import AreaScore
from services.area_mapper import AreaMapper

logger = logging.getLogger(__name__)


class Outcome:
    """Winning area of a submission plus what gets reported for it"""

    def __init__(self, area, principal_score, suggestions, ranking):
        self.area = area
        self.principal_score = principal_score
        self.suggestions = suggestions
        self.ranking = ranking

    def to_dict(self):
        return {
            'area': self.area,
            'principal_score': self.principal_score,
            'suggestions': list(self.suggestions),
            'ranking': [score.to_dict() for score in self.ranking]
        }


class ScoringService:
    """
    Reduces answered options to a total per area and picks the winning area.

    Ties between equal totals go to the area encountered first while
    summing, i.e. the one whose first contribution comes earliest in
    ledger order.
    """

    def __init__(self, area_mapper=None):
        self.area_mapper = area_mapper or AreaMapper()

    # -------------------------
    # Resolution
    # -------------------------
    def resolve_groups(self, groups):
        """
        Turn raw option->scoring groups into lists of ScoringPair.

        groups: iterable of {"option_id": ..., "scoring": [{"area", "value"}, ...]}
        Raises DataIntegrityError on any shape mismatch.
        """
        resolved = []
        for group in groups:
            if not isinstance(group, dict) or 'scoring' not in group:
                raise DataIntegrityError(f"Scoring group has an invalid shape: {group!r}")

            pairs = group['scoring'] or []
            if not isinstance(pairs, list):
                raise DataIntegrityError(f"Scoring pairs must be a list: {group!r}")

            resolved.append([ScoringPair.from_document(pair) for pair in pairs])
        return resolved

    # -------------------------
    # Scoring
    # -------------------------
    def calculate_scores(self, resolved_pairs):
        """Sum the weights per area. Keys keep first-encountered order."""
        score_map = {}
        for pairs in resolved_pairs:
            for pair in pairs:
                score_map[pair.area] = score_map.get(pair.area, 0) + pair.value
        return score_map

    def rank_areas(self, score_map):
        """AreaScore list sorted by total, descending; stable for equal totals."""
        ranking = [AreaScore(area, total) for area, total in score_map.items()]
        ranking.sort(key=lambda score: score.total, reverse=True)
        return ranking

    def determine_outcome(self, resolved_pairs):
        ranking = self.rank_areas(self.calculate_scores(resolved_pairs))

        if not ranking:
            logger.info("No answered option carries a scoring pair")
            return Outcome(NO_AREA, 0, [], ranking)

        winner = ranking[0]
        suggestions = self.area_mapper.get_suggestions(winner.area)
        logger.debug(f"Area ranking: {[s.to_dict() for s in ranking]}")

        return Outcome(winner.area, winner.total, suggestions, ranking)

    def score_groups(self, groups):
        """Full reduction of stored option->scoring groups into an Outcome"""
        return self.determine_outcome(self.resolve_groups(groups))
