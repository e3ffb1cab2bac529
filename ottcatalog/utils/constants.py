"""
Constantes globales pour OttCatalog.

Ce module contient les constantes utilisees dans l'application:
- Espace de noms des identifiants et valeurs par defaut des items
- Plateformes OTT scrapees par defaut
- Definitions des catalogues du manifeste
- URLs et intitules FlixPatrol
- Extensions video reconnues par le resolveur de streams
"""

from ottcatalog.core.entities.catalog import CatalogDefinition
from ottcatalog.core.value_objects.content_type import ContentType

# Prefixe des identifiants produits par l'add-on
ID_NAMESPACE = "ottcatalog"

ADDON_ID = "com.ottcatalog.india"
ADDON_NAME = "India OTT Catalog"
ADDON_DESCRIPTION = (
    "Films et series des plateformes OTT indiennes, classements FlixPatrol "
    "et selection curatee, enrichis via TMDB."
)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)

# Valeurs de repli des items
DEFAULT_POSTER_SHAPE = "poster"
DEFAULT_GENRE = "Indian"
DEFAULT_DESCRIPTION = "Watch {title} on Indian OTT platforms"
DEFAULT_MOVIE_POSTER = "https://via.placeholder.com/300x450?text=Movie"
DEFAULT_SERIES_POSTER = "https://via.placeholder.com/300x450?text=Series"

# Plateformes OTT scrapees (surchargeables via OTTCATALOG_PLATFORMS en JSON)
DEFAULT_PLATFORMS = (
    {
        "id": "aha",
        "name": "Aha",
        "base_url": "https://www.aha.video",
        "movie_path": "/movies",
        "series_path": "/web-series",
        "languages": ["Telugu", "Tamil", "Kannada", "Malayalam", "Hindi"],
        "south_indian": True,
    },
    {
        "id": "hotstar",
        "name": "Disney+ Hotstar",
        "base_url": "https://www.hotstar.com",
        "movie_path": "/movies",
        "series_path": "/tv",
        "languages": ["Hindi", "English", "Tamil", "Telugu", "Kannada", "Malayalam", "Bengali", "Marathi"],
    },
    {
        "id": "sonyliv",
        "name": "SonyLIV",
        "base_url": "https://www.sonyliv.com",
        "movie_path": "/movies",
        "series_path": "/tv-shows",
        "languages": ["Hindi", "Tamil", "Telugu", "Kannada", "Malayalam", "Bengali", "Marathi"],
    },
    {
        "id": "zee5",
        "name": "ZEE5",
        "base_url": "https://www.zee5.com",
        "movie_path": "/movies",
        "series_path": "/web-series",
        "languages": ["Hindi", "Tamil", "Telugu", "Kannada", "Malayalam", "Bengali", "Marathi"],
    },
    {
        "id": "sun-nxt",
        "name": "Sun NXT",
        "base_url": "https://www.sun-nxt.com",
        "movie_path": "/movies",
        "series_path": "/shows",
        "languages": ["Tamil", "Telugu", "Kannada", "Malayalam"],
        "south_indian": True,
    },
)

# Noms des adaptateurs sources
SOURCE_PLATFORMS = "platforms"
SOURCE_TRENDING = "trending"
SOURCE_CURATED = "curated"
ALL_SOURCES = (SOURCE_PLATFORMS, SOURCE_TRENDING, SOURCE_CURATED)

# Catalogues exposes dans le manifeste
CATALOGS = (
    CatalogDefinition("indian-movies", ContentType.MOVIE, "Indian OTT Movies", ALL_SOURCES),
    CatalogDefinition("indian-series", ContentType.SERIES, "Indian OTT Series", ALL_SOURCES),
    CatalogDefinition(
        "south-indian-movies", ContentType.MOVIE, "South Indian Movies",
        (SOURCE_PLATFORMS, SOURCE_CURATED),
    ),
    CatalogDefinition(
        "south-indian-series", ContentType.SERIES, "South Indian Series",
        (SOURCE_PLATFORMS, SOURCE_CURATED),
    ),
    CatalogDefinition("trending-movies", ContentType.MOVIE, "Trending in India", (SOURCE_TRENDING,)),
    CatalogDefinition("trending-series", ContentType.SERIES, "Trending Shows in India", (SOURCE_TRENDING,)),
    CatalogDefinition("curated-action-movies", ContentType.MOVIE, "Action Picks", (SOURCE_CURATED,)),
    CatalogDefinition("curated-drama-movies", ContentType.MOVIE, "Drama Picks", (SOURCE_CURATED,)),
    CatalogDefinition("curated-thriller-series", ContentType.SERIES, "Thriller Series", (SOURCE_CURATED,)),
    CatalogDefinition("curated-drama-series", ContentType.SERIES, "Drama Series", (SOURCE_CURATED,)),
)

# Prefixe des catalogues restreints aux plateformes d'Inde du Sud
SOUTH_INDIAN_PREFIX = "south-indian"

# Genre filtre par chaque catalogue "bucket" du jeu curate
CURATED_GENRE_BUCKETS = {
    "curated-action-movies": "Action",
    "curated-drama-movies": "Drama",
    "curated-thriller-series": "Thriller",
    "curated-drama-series": "Drama",
}
CURATED_MAX_RESULTS = 20

# Genres proposes par le filtre "genre" des catalogues
CATALOG_GENRES = (
    "Action",
    "Adventure",
    "Biography",
    "Comedy",
    "Crime",
    "Drama",
    "Fantasy",
    "Mystery",
    "Romance",
    "Sport",
    "Thriller",
)

# FlixPatrol (classements top 10)
FLIXPATROL_BASE_URL = "https://flixpatrol.com"
FLIXPATROL_URLS = (
    "https://flixpatrol.com/top10/netflix/india/",
    "https://www.flixpatrol.com/top10/netflix/india/",
)
FLIXPATROL_SECTION_TITLES = {
    ContentType.MOVIE: "TOP 10 Movies",
    ContentType.SERIES: "TOP 10 TV Shows",
}
FLIXPATROL_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
    "Referer": "https://www.google.com/",
}

# Extensions video reconnues par le resolveur de streams
VIDEO_EXTENSIONS = (
    ".mp4",
    ".mkv",
    ".avi",
    ".mov",
    ".wmv",
    ".flv",
    ".webm",
    ".m4v",
)

# Index torrent (API compatible apibay)
TORRENT_MIRRORS = (
    "https://apibay.org",
    "https://thepiratebay.org/api",
)
TORRENT_USER_AGENT = "Mozilla/5.0 (compatible; Stremio Addon)"
TORRENT_MAX_RESULTS = 10
TORRENT_RESULTS_PER_MIRROR = 5
# apibay retourne un faux resultat avec ce hash quand la recherche est vide
EMPTY_INFO_HASH = "0" * 40

# Services debrid reconnus, dans l'ordre d'interrogation
DEBRID_SERVICES = ("realDebrid", "torbox", "allDebrid", "premiumize")
