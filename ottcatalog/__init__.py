"""
OttCatalog - Add-on Stremio de catalogue OTT indien.

Ce package agrege des catalogues de films et series depuis plusieurs sources
(scraping des plateformes OTT, classements FlixPatrol, jeu de donnees curate),
les enrichit via TMDB et expose l'API du protocole d'add-on Stremio.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur)
- services/ : Couche application (agregation, enrichissement, streams)
- adapters/ : Couche infrastructure (HTTP, scraping, TMDB, debrid)
- web/ : API FastAPI exposee aux clients Stremio
"""

__version__ = "1.0.0"
