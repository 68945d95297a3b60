"""Score de similarité normalisé dans [0, 1]."""
from menusearch.scoring.distance import edit_distance
from menusearch.validation import ensure_text


def similarity(s1: str, s2: str) -> float:
    """
    Similarité (L - distance) / L, avec L la longueur de la plus longue chaîne.

    1.0 = chaînes identiques (à la casse près), 0.0 = rien en commun.
    Deux chaînes vides sont considérées identiques.
    """
    a = ensure_text(s1, "s1").lower()
    b = ensure_text(s2, "s2").lower()

    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return (longest - edit_distance(a, b)) / longest
