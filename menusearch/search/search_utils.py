"""
SearchUtils - recherche floue sur les catalogues de restaurants et de plats.

Présets de champs et rapport de classement (compteurs, temps de calcul).
"""

import time
from collections.abc import Mapping
from typing import Any, List, Optional, Sequence

from menusearch.config import settings
from menusearch.models import SearchReport
from menusearch.scoring.ranking import FieldExtractor, Ranker, is_blank, rank_by_search

RESTAURANT_FIELDS = ('restaurant_name', 'cuisine', 'description', 'address')
FOOD_FIELDS = ('name', 'description', 'category')


def get_field(record: Any, name: str) -> Any:
    """Lit un champ d'un dict ou d'un objet ; None si absent."""
    if record is None:
        return None
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def restaurant_fields(restaurant: Any) -> List[Optional[str]]:
    """Champs recherchables d'un restaurant."""
    return [get_field(restaurant, name) for name in RESTAURANT_FIELDS]


def food_fields(food: Any) -> List[Optional[str]]:
    """Champs recherchables d'un plat, y compris le nom de son restaurant."""
    fields = [get_field(food, name) for name in FOOD_FIELDS]
    fields.append(get_field(get_field(food, 'restaurants'), 'restaurant_name'))
    return fields


def search_restaurants(restaurants: Sequence[Any], query: str) -> Sequence[Any]:
    """Recherche floue de restaurants (seuil tolérant)."""
    return rank_by_search(
        restaurants, query, restaurant_fields, settings.LENIENT_THRESHOLD
    )


def search_foods(foods: Sequence[Any], query: str) -> Sequence[Any]:
    """Recherche floue de plats (seuil tolérant)."""
    return rank_by_search(foods, query, food_fields, settings.LENIENT_THRESHOLD)


class SearchUtils:
    """Utilitaire de recherche : classement et métriques."""

    def __init__(self, threshold: Optional[float] = None):
        self.ranker = Ranker(threshold)

    def process_results(
        self,
        items: Sequence[Any],
        query: str,
        field_extractor: FieldExtractor,
        threshold: Optional[float] = None,
    ) -> SearchReport:
        """
        Classe les éléments et renvoie un rapport.

        Args:
            items: Le catalogue
            query: La query utilisateur
            field_extractor: Fonction item -> champs texte
            threshold: Seuil pour cet appel (défaut : celui du constructeur)

        Returns:
            SearchReport avec hits triés, total, exact_count, etc.
        """
        ranker = self.ranker if threshold is None else Ranker(threshold)
        start_time = time.time()

        if is_blank(query):
            # Pas de recherche active : catalogue complet, sans tri
            hits = list(items)
            exact_count = 0
            active = False
        else:
            results = ranker.rank(items, query, field_extractor)
            hits = [r.item for r in results]
            exact_count = sum(1 for r in results if r.exact_match)
            active = True

        end_time = time.time()

        return SearchReport(
            hits=hits,
            total=len(hits),
            has_exact_results=exact_count > 0,
            exact_count=exact_count,
            total_before_filter=len(items),
            query_time_ms=round((end_time - start_time) * 1000, 2),
            active=active,
        )
