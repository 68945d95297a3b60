"""Modèles des résultats de recherche."""
from dataclasses import dataclass
from typing import Any, List

from pydantic import BaseModel


@dataclass(frozen=True)
class FieldScore:  # pylint: disable=too-few-public-methods
    """Score d'un champ pour une query."""
    score: float
    exact_match: bool


@dataclass(frozen=True)
class MatchResult:  # pylint: disable=too-few-public-methods
    """Élément candidat avec son score de pertinence. Recalculé à chaque query."""
    item: Any
    score: float
    exact_match: bool


class SearchReport(BaseModel):  # pylint: disable=too-few-public-methods
    """Résultat d'un classement avec ses métriques."""
    hits: List[Any]
    total: int
    has_exact_results: bool
    exact_count: int
    total_before_filter: int
    query_time_ms: float
    # False quand la query est vide : aucune recherche active
    active: bool = True
