"""Recherche en direct pour un champ de saisie : debounce + dernière query gagnante."""
import asyncio
from typing import Any, Optional, Sequence

from menusearch.config import settings
from menusearch.logger import logger
from menusearch.scoring.ranking import FieldExtractor, rank_by_search
from menusearch.validation import ensure_debounce, ensure_threshold


class DebouncedSearch:
    """
    Lance le classement après un délai d'inactivité, dans un thread de travail.

    Chaque appel à submit() rend obsolètes les appels précédents encore en cours :
    ils renvoient None au lieu de leurs résultats.
    À piloter depuis une seule boucle asyncio.
    """

    def __init__(
        self,
        items: Sequence[Any],
        field_extractor: FieldExtractor,
        threshold: Optional[float] = None,
        debounce_ms: Optional[int] = None,
    ):
        self.items = items
        self.field_extractor = field_extractor
        self.threshold = ensure_threshold(
            settings.DEFAULT_THRESHOLD if threshold is None else threshold
        )
        self.debounce_ms = ensure_debounce(
            settings.SEARCH_DEBOUNCE_MS if debounce_ms is None else debounce_ms
        )
        self.latest: Optional[Sequence[Any]] = None
        self._generation = 0

    def update_items(self, items: Sequence[Any]) -> None:
        """Remplace le catalogue (ex: après un nouveau chargement)."""
        self.items = items

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    async def submit(self, query: str) -> Optional[Sequence[Any]]:
        """
        Soumet une nouvelle query.

        Returns:
            Les éléments classés, ou None si une query plus récente a été soumise entre-temps.
        """
        self._generation += 1
        generation = self._generation

        await asyncio.sleep(self.debounce_ms / 1000)
        if not self._is_current(generation):
            logger.debug("Query {query!r} superseded before ranking", query=query)
            return None

        results = await asyncio.to_thread(
            rank_by_search, self.items, query, self.field_extractor, self.threshold
        )
        if not self._is_current(generation):
            logger.debug("Query {query!r} superseded, results discarded", query=query)
            return None

        self.latest = results
        return results
