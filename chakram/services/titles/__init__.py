"""
Moteur de resolution et de classement des titres du catalogue.

Composants (des feuilles vers l'orchestration) :
- normalize : slug canonique d'un titre
- dedupe : series promues hors des saisons, doublons retires
- TitleScorer / score : pertinence d'un titre pour une requete
- TitleQuery : deduplication + filtrage + suppression des doublons SD/UHD + tri
- order_episodes : tri des episodes par (saison, episode)

Toutes ces fonctions sont pures et synchrones: aucun etat partage entre appels.
"""

from chakram.services.titles.deduplicator import dedupe
from chakram.services.titles.ordering import order_episodes
from chakram.services.titles.query import TitleQuery, strip_uhd_marker
from chakram.services.titles.scorer import TitleScorer, score
from chakram.services.titles.slug import normalize

__all__ = [
    "TitleQuery",
    "TitleScorer",
    "dedupe",
    "normalize",
    "order_episodes",
    "score",
    "strip_uhd_marker",
]
