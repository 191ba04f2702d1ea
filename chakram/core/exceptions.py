"""
Exceptions du domaine Chakram.

Toutes les erreurs levees volontairement par le package derivent de
ChakramError, ce qui permet a la CLI de les intercepter en un seul point.
"""


class ChakramError(Exception):
    """Erreur de base du package."""


class RecordFormatError(ChakramError):
    """Enregistrement de catalogue brut impossible a convertir en entite."""


class CatalogError(ChakramError):
    """Le catalogue a repondu avec une erreur explicite."""


class NotAuthorizedError(ChakramError):
    """Aucun token de lecture obtenu: cookies absents ou expires."""

    def __init__(self, message: str = "Not authorized") -> None:
        super().__init__(message)


class LicenseError(ChakramError):
    """L'endpoint de licence Widevine a refuse le challenge."""


class ResumeInfoError(ChakramError):
    """Impossible de determiner l'episode ou la position de reprise."""

    def __init__(self, message: str = "Unable to determine episode to resume") -> None:
        super().__init__(message)
