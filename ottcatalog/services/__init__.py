"""
Couche services (cas d'usage).

- Aggregator: fan-out vers les adaptateurs sources, fusion, tri
- EnricherService: enrichissement TMDB avec limiteur de debit partage
- StreamResolver: streams debrid avec repli torrent
- CatalogService / MetaService / StreamService: reponses des routes

Les services dependent des ports (core/), jamais des routes web.
"""
