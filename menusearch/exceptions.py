"""Exceptions de la bibliothèque."""


class InvalidArgument(ValueError):
    """Violation du contrat d'appel (valeur non textuelle, seuil hors [0, 1])."""
