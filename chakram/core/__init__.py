"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), objets valeur
et exceptions. Cette couche n'a AUCUNE dépendance vers l'infrastructure
(adapters, HTTP, frameworks).

Sous-packages :
- entities/ : Titres du catalogue (Series, Season, Episode, Movie)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (manifestes, infos de lecture)
"""
