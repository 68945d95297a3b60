"""Validation des arguments des fonctions publiques."""
from typing import Any, Optional

from menusearch.exceptions import InvalidArgument
from menusearch.logger import logger


def ensure_text(value: Any, name: str) -> str:
    """
    Vérifie qu'une valeur comparée est bien une chaîne.

    Args:
        value: La valeur à vérifier
        name: Nom de l'argument (pour le message d'erreur)

    Returns:
        str: La valeur inchangée

    Raises:
        InvalidArgument: Si la valeur n'est pas une chaîne (None compris)
    """
    if not isinstance(value, str):
        logger.warning("Invalid {name}: expected str, got {kind}", name=name, kind=type(value).__name__)
        raise InvalidArgument(f"{name} must be a string, got {type(value).__name__}")
    return value


def ensure_optional_text(value: Any, name: str) -> Optional[str]:
    """Comme ensure_text, mais None est accepté."""
    if value is None:
        return None
    return ensure_text(value, name)


def ensure_threshold(threshold: Any) -> float:
    """
    Valide un seuil de similarité.

    Raises:
        InvalidArgument: Si le seuil n'est pas un nombre de [0, 1]
    """
    # bool est un int en Python : on le refuse explicitement
    if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
        logger.warning("Invalid threshold type: {kind}", kind=type(threshold).__name__)
        raise InvalidArgument(f"threshold must be a number, got {type(threshold).__name__}")
    if not 0.0 <= threshold <= 1.0:
        logger.warning("Threshold out of range: {threshold}", threshold=threshold)
        raise InvalidArgument(f"threshold must lie in [0, 1], got {threshold}")
    return float(threshold)


def ensure_debounce(debounce_ms: Any) -> int:
    """
    Valide un délai de debounce en millisecondes.

    Raises:
        InvalidArgument: Si le délai n'est pas un entier >= 0
    """
    if isinstance(debounce_ms, bool) or not isinstance(debounce_ms, int):
        logger.warning("Invalid debounce type: {kind}", kind=type(debounce_ms).__name__)
        raise InvalidArgument(f"debounce_ms must be an integer, got {type(debounce_ms).__name__}")
    if debounce_ms < 0:
        logger.warning("Negative debounce: {debounce_ms}", debounce_ms=debounce_ms)
        raise InvalidArgument(f"debounce_ms must be >= 0, got {debounce_ms}")
    return debounce_ms
