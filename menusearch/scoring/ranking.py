"""Classement des éléments d'un catalogue par pertinence."""
import time
from typing import Callable, List, Optional, Sequence, TypeVar

from menusearch.logger import logger
from menusearch.models import MatchResult
from menusearch.scoring.evaluator import FieldEvaluator
from menusearch.validation import ensure_optional_text, ensure_text

T = TypeVar('T')

FieldExtractor = Callable[[T], Sequence[Optional[str]]]


def is_blank(query: str) -> bool:
    """Une query vide ou faite d'espaces signifie : pas de recherche active."""
    return not ensure_text(query, "query").strip()


class Ranker:
    """Applique l'évaluateur à tous les champs de chaque élément puis trie."""

    def __init__(self, threshold: Optional[float] = None):
        self.evaluator = FieldEvaluator(threshold)

    @property
    def threshold(self) -> float:
        return self.evaluator.threshold

    def score_item(self, item: T, query: str, field_extractor: FieldExtractor) -> MatchResult:
        """Calcule le score d'un élément : le meilleur de ses champs."""
        best_score = 0.0
        exact_match = False

        for field in field_extractor(item):
            text = ensure_optional_text(field, "field")
            if not text:
                continue

            field_score = self.evaluator.score_field(query, text)
            if field_score.exact_match:
                # Aucun autre champ ne peut faire mieux
                best_score = field_score.score
                exact_match = True
                break
            best_score = max(best_score, field_score.score)

        return MatchResult(item=item, score=best_score, exact_match=exact_match)

    def sort_results(self, results: List[MatchResult]) -> List[MatchResult]:
        """Exacts d'abord, puis score décroissant. Le tri stable conserve l'ordre d'entrée à égalité."""
        return sorted(results, key=lambda r: (not r.exact_match, -r.score))

    def rank(
        self,
        items: Sequence[T],
        query: str,
        field_extractor: FieldExtractor,
    ) -> List[MatchResult]:
        """
        Score, filtre et trie les éléments.

        Args:
            items: Le catalogue (jamais modifié)
            query: La query utilisateur
            field_extractor: Fonction item -> champs texte (None autorisé)

        Returns:
            Les MatchResult dont le score atteint le seuil, triés.
            Query vide : un résultat exact par élément, dans l'ordre d'entrée.
        """
        if is_blank(query):
            return [MatchResult(item=item, score=1.0, exact_match=True) for item in items]

        start_time = time.perf_counter()
        q = query.lower().strip()

        scored = (self.score_item(item, q, field_extractor) for item in items)
        survivors = [r for r in scored if r.score >= self.threshold]
        ranked = self.sort_results(survivors)

        logger.debug(
            "Ranked {total} items for {query!r}: {kept} kept in {elapsed:.2f} ms",
            total=len(items), query=q, kept=len(ranked),
            elapsed=(time.perf_counter() - start_time) * 1000,
        )
        return ranked


def rank_by_search(
    items: Sequence[T],
    query: str,
    field_extractor: FieldExtractor,
    threshold: Optional[float] = None,
) -> Sequence[T]:
    """
    Filtre et trie des éléments selon leur pertinence pour la query.

    Une query vide renvoie `items` tel quel (pas de recherche active),
    ce qui est distinct d'une recherche sans résultat (liste vide).
    """
    ranker = Ranker(threshold)
    if is_blank(query):
        return items
    return [result.item for result in ranker.rank(items, query, field_extractor)]
