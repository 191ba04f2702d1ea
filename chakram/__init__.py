"""
Chakram - Client du catalogue Amazon Prime Video.

Ce package permet de s'authentifier avec les cookies du navigateur, de lister
films, saisons et episodes, de resoudre les manifestes de lecture et les
licences DRM, et de retrouver un titre precis parmi des resultats de
catalogue bruites et dupliques.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur)
- services/ : Couche application (resolution et classement des titres)
- adapters/ : Couche infrastructure (CLI, client API, normalisation JSON)
"""

__version__ = "0.1.0"
