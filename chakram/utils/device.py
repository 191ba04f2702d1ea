"""
Generation de l'identifiant d'appareil envoye avec chaque requete.
"""

import hashlib
import hmac
import uuid as uuid_lib
from typing import Optional


def generate_device_id(user_agent: str, uuid: Optional[str] = None) -> str:
    """
    Genere un identifiant d'appareil "unique" pour les requetes.

    HMAC-SHA224 d'un UUID4 aleatoire, avec le user agent comme cle.

    Args:
        user_agent: User agent annonce au catalogue
        uuid: UUID a utiliser (aleatoire si absent, fixe pour les tests)

    Returns:
        Digest hexadecimal (56 caracteres)
    """
    if uuid is None:
        uuid = str(uuid_lib.uuid4())
    digest = hmac.new(user_agent.encode(), uuid.encode(), hashlib.sha224)
    return digest.hexdigest()
