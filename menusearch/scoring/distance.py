"""Calcul de la distance de Levenshtein."""
from typing import List

from menusearch.validation import ensure_text


def edit_distance(s1: str, s2: str) -> int:
    """
    Calcule la distance de Levenshtein entre deux chaînes, sans tenir compte de la casse.

    Seule la casse est normalisée : accents et ponctuation comptent.
    Le buffer de travail est local à l'appel et de taille min(len) + 1.

    Args:
        s1: Première chaîne
        s2: Deuxième chaîne

    Returns:
        Nombre minimal d'insertions, suppressions et substitutions

    Raises:
        InvalidArgument: Si l'une des valeurs n'est pas une chaîne
    """
    a = ensure_text(s1, "s1").lower()
    b = ensure_text(s2, "s2").lower()

    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    # row[j] = distance entre a[:i] et b[:j]
    row: List[int] = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        diagonal = row[0]
        row[0] = i
        for j, cb in enumerate(b, start=1):
            above = row[j]
            row[j] = min(
                above + 1,  # suppression
                row[j - 1] + 1,  # insertion
                diagonal + (ca != cb),  # substitution
            )
            diagonal = above
    return row[-1]
