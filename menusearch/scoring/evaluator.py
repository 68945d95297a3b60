"""Évaluation floue d'un champ texte."""
from typing import List, Optional

from menusearch.config import settings
from menusearch.models import FieldScore
from menusearch.scoring.similarity import similarity
from menusearch.validation import ensure_optional_text, ensure_text, ensure_threshold

EXACT = FieldScore(score=1.0, exact_match=True)


def split_words(text: str) -> List[str]:
    """Découpe un texte sur les espaces."""
    return text.split()


class FieldEvaluator:
    """Évaluateur de champs pour le matching flou."""

    def __init__(self, threshold: Optional[float] = None):
        self.threshold = ensure_threshold(
            settings.DEFAULT_THRESHOLD if threshold is None else threshold
        )

    def score_field(self, query: str, field: str) -> FieldScore:
        """
        Calcule le score d'un champ pour une query déjà normalisée (minuscules, sans espaces autour).

        Une sous-chaîne donne 1.0 (exact). Sinon on garde le meilleur score entre
        le champ entier et chacun de ses mots : une query courte n'est pas
        pénalisée par la longueur d'un champ à plusieurs mots.
        """
        text = field.lower()
        if query in text:
            return EXACT

        best = similarity(query, text)
        for word in split_words(text):
            best = max(best, similarity(query, word))
        return FieldScore(score=best, exact_match=False)

    def matches(self, query: str, target: Optional[str]) -> bool:
        """Vérifie si la query correspond au champ ; la première règle satisfaite l'emporte."""
        q = ensure_text(query, "query").lower().strip()
        t = ensure_optional_text(target, "target")
        if not q or not t:
            return False
        text = t.lower().strip()

        # 1) Sous-chaîne
        if q in text:
            return True

        # 2) Champ entier
        if similarity(q, text) >= self.threshold:
            return True

        # 3) Mot par mot
        return any(
            similarity(q, word) >= self.threshold for word in split_words(text)
        )


def fuzzy_match(query: str, target: Optional[str], threshold: Optional[float] = None) -> bool:
    """
    Vérifie si une query correspond à un texte de façon floue.

    Args:
        query: Ce que l'utilisateur a saisi
        target: Le texte à comparer (None = pas de correspondance)
        threshold: Seuil de similarité dans [0, 1] (défaut settings.DEFAULT_THRESHOLD)

    Returns:
        True si la query est contenue dans le texte, ou si le texte entier
        ou l'un de ses mots atteint le seuil de similarité.
    """
    return FieldEvaluator(threshold).matches(query, target)
