"""menusearch - recherche floue et classement par pertinence sur de petits catalogues."""
from menusearch.config import settings
from menusearch.exceptions import InvalidArgument
from menusearch.logger import configure_logging
from menusearch.models import MatchResult, SearchReport
from menusearch.scoring.distance import edit_distance
from menusearch.scoring.evaluator import FieldEvaluator, fuzzy_match
from menusearch.scoring.ranking import Ranker, rank_by_search
from menusearch.scoring.similarity import similarity
from menusearch.search.live_search import DebouncedSearch
from menusearch.search.search_utils import SearchUtils, search_foods, search_restaurants

__all__ = [
    "DebouncedSearch",
    "FieldEvaluator",
    "InvalidArgument",
    "MatchResult",
    "Ranker",
    "SearchReport",
    "SearchUtils",
    "configure_logging",
    "edit_distance",
    "fuzzy_match",
    "rank_by_search",
    "search_foods",
    "search_restaurants",
    "settings",
    "similarity",
]
