"""
Utilitaires et constantes pour Chakram.

Ce module contient les constantes et fonctions utilitaires partagees.
"""

from chakram.utils.constants import ATV_ROOT, URL_ROOT, USER_AGENT
from chakram.utils.device import generate_device_id

__all__ = [
    "ATV_ROOT",
    "URL_ROOT",
    "USER_AGENT",
    "generate_device_id",
]
