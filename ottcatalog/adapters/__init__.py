"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- api/ : Client de metadonnees (TMDB), cache memoire, retry
- http/ : Cache de recuperation HTTP
- sources/ : Adaptateurs sources de catalogue (plateformes, tendances, curation)
- streams/ : Fournisseurs de streams (services debrid, index torrent)

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""
