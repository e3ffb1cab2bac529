"""
Client TMDB pour la recherche et recuperation de metadonnees films et series.

Implemente l'interface IMetadataClient pour TMDB (The Movie Database).
Utilise le cache memoire et le mecanisme de retry pour gerer
le rate limiting.

Usage:
    cache = MemoryCache()
    client = TMDBClient(api_key="your_key", cache=cache)
    results = await client.search("RRR", ContentType.MOVIE, year=2022)
    details = await client.get_details(results[0].id, ContentType.MOVIE)
    await client.close()
"""

from typing import Any, Optional

import httpx

from ottcatalog.adapters.api.cache import MemoryCache
from ottcatalog.adapters.api.retry import request_with_retry
from ottcatalog.core.ports.api_clients import (
    IMetadataClient,
    MediaDetails,
    SearchResult,
    SeasonInfo,
)
from ottcatalog.core.value_objects.content_type import ContentType


def _year_from(date: Optional[str]) -> Optional[int]:
    if date and len(date) >= 4 and date[:4].isdigit():
        return int(date[:4])
    return None


class TMDBClient(IMetadataClient):
    """
    Client API TMDB v3.

    Implemente IMetadataClient avec:
    - Recherche par titre (films: /search/movie, series: /search/tv)
    - Details complets (/movie/{id}, /tv/{id})
    - Recherche par ID IMDb (/find/{imdb_id})
    - Cache memoire (24h recherches, 7j details)
    - Relance des reponses 429 via request_with_retry
    """

    def __init__(
        self,
        api_key: str,
        cache: MemoryCache,
        base_url: str = "https://api.themoviedb.org/3",
        image_base_url: str = "https://image.tmdb.org/t/p",
        poster_size: str = "w500",
        backdrop_size: str = "original",
        language: str = "en-US",
        region: str = "IN",
        timeout: float = 10.0,
    ) -> None:
        """
        Args:
            api_key: Cle API TMDB (v3) ou Read Access Token (v4)
            cache: Instance MemoryCache pour le caching des resultats
            base_url: URL de base de l'API v3
            image_base_url: URL de base du CDN d'images
            poster_size: Jeton de taille des affiches (ex: "w500")
            backdrop_size: Jeton de taille des images de fond
            language: Langue des resultats
            region: Region utilisee pour la recherche de films
            timeout: Timeout des requetes en secondes
        """
        self._api_key = api_key
        self._cache = cache
        self._base_url = base_url
        self._image_base_url = image_base_url.rstrip("/")
        self._poster_size = poster_size
        self._backdrop_size = backdrop_size
        self._language = language
        self._region = region
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """
        Client httpx partage, (re)cree au premier appel ou apres close().

        Une cle courte (v3) part en query string, un jeton long (v4,
        JWT) en en-tete Authorization.
        """
        if self._client is None or self._client.is_closed:
            headers = {"Accept": "application/json"}
            params = {}
            if len(self._api_key) > 40:
                headers["Authorization"] = "Bearer " + self._api_key
            else:
                params["api_key"] = self._api_key

            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers=headers,
                params=params,
                timeout=self._timeout,
            )
        return self._client

    @property
    def source(self) -> str:
        return "tmdb"

    def poster_url(self, path: Optional[str]) -> Optional[str]:
        if not path:
            return None
        return f"{self._image_base_url}/{self._poster_size}{path}"

    def backdrop_url(self, path: Optional[str]) -> Optional[str]:
        if not path:
            return None
        return f"{self._image_base_url}/{self._backdrop_size}{path}"

    async def search(
        self,
        query: str,
        content_type: ContentType,
        year: Optional[int] = None,
    ) -> list[SearchResult]:
        """
        Recherche par titre sur /search/movie ou /search/tv.

        La reponse est lue dans le cache avant tout appel reseau et y est
        conservee 24h. L'annee filtre release_date (films) ou
        first_air_date (series).

        Returns:
            Les resultats dans l'ordre TMDB, liste vide si rien ne correspond
        """
        path = content_type.tmdb_path
        cache_key = f"tmdb:search:{path}:{query}:{year or ''}"

        cached = await self._cache.get(cache_key)
        if cached is not None:
            return cached

        params: dict[str, Any] = {
            "query": query,
            "language": self._language,
            "include_adult": "false",
        }
        if content_type is ContentType.MOVIE:
            params["region"] = self._region
            if year:
                params["year"] = year
        elif year:
            params["first_air_date_year"] = year

        response = await request_with_retry(
            self._get_client(), "GET", f"/search/{path}", params=params
        )
        data = response.json()

        if content_type is ContentType.MOVIE:
            title_key, original_key, date_key = "title", "original_title", "release_date"
        else:
            title_key, original_key, date_key = "name", "original_name", "first_air_date"

        results = []
        for raw in data.get("results") or []:
            title = raw.get(title_key) or ""
            original = raw.get(original_key) or ""
            results.append(
                SearchResult(
                    id=str(raw["id"]),
                    title=title or original,
                    original_title=original if original != title else None,
                    year=_year_from(raw.get(date_key)),
                    source=self.source,
                )
            )

        await self._cache.set_search(cache_key, results)
        return results

    async def get_details(
        self, media_id: str, content_type: ContentType
    ) -> Optional[MediaDetails]:
        """
        Recupere les details complets d'un film ou d'une serie.

        Les details sont caches pour 7 jours.

        Args:
            media_id: ID TMDB
            content_type: Film ou serie

        Returns:
            MediaDetails, ou None si non trouve (404)
        """
        path = content_type.tmdb_path
        cache_key = f"tmdb:details:{path}:{media_id}"

        cached = await self._cache.get(cache_key)
        if cached is not None:
            return cached

        try:
            response = await request_with_retry(
                self._get_client(),
                "GET",
                f"/{path}/{media_id}",
                params={"language": self._language, "append_to_response": "external_ids"},
            )
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                return None
            raise

        details = self._parse_details(response.json(), content_type)
        await self._cache.set_details(cache_key, details)
        return details

    def _parse_details(self, data: dict, content_type: ContentType) -> MediaDetails:
        """Convertit une reponse /movie/{id} ou /tv/{id} en MediaDetails."""
        genres = tuple(g["name"] for g in data.get("genres", []) if g.get("name"))
        external_ids = data.get("external_ids") or {}
        imdb_id = data.get("imdb_id") or external_ids.get("imdb_id")

        if content_type is ContentType.MOVIE:
            countries = data.get("production_countries") or []
            return MediaDetails(
                id=str(data["id"]),
                content_type=content_type,
                title=data.get("title") or data.get("original_title", ""),
                original_title=data.get("original_title"),
                overview=data.get("overview") or None,
                release_date=data.get("release_date") or None,
                genres=genres,
                poster_path=data.get("poster_path"),
                backdrop_path=data.get("backdrop_path"),
                vote_average=data.get("vote_average"),
                runtime=data.get("runtime") or None,
                status=data.get("status"),
                original_language=data.get("original_language"),
                origin_country=countries[0].get("iso_3166_1") if countries else None,
                imdb_id=imdb_id,
            )

        # Saison 0 = "Specials" chez TMDB, ignoree
        seasons = tuple(
            SeasonInfo(
                season_number=s["season_number"],
                name=s.get("name", ""),
                episode_count=s.get("episode_count"),
                air_date=s.get("air_date"),
            )
            for s in data.get("seasons", [])
            if s.get("season_number")
        )
        origin = data.get("origin_country") or []
        return MediaDetails(
            id=str(data["id"]),
            content_type=content_type,
            title=data.get("name") or data.get("original_name", ""),
            original_title=data.get("original_name"),
            overview=data.get("overview") or None,
            release_date=data.get("first_air_date") or None,
            genres=genres,
            poster_path=data.get("poster_path"),
            backdrop_path=data.get("backdrop_path"),
            vote_average=data.get("vote_average"),
            number_of_seasons=data.get("number_of_seasons"),
            seasons=seasons,
            status=data.get("status"),
            original_language=data.get("original_language"),
            origin_country=origin[0] if origin else None,
            imdb_id=imdb_id,
        )

    async def find_by_imdb_id(
        self, imdb_id: str, content_type: Optional[ContentType] = None
    ) -> Optional[MediaDetails]:
        """
        Recherche un film ou une serie via son ID IMDb.

        Utilise l'endpoint /find/{external_id} avec external_source=imdb_id,
        puis recupere les details complets du premier resultat du type demande.

        Sans content_type, les films sont essayes avant les series.
        Retourne None si /find ne renvoie aucun resultat exploitable.
        """
        cache_key = f"tmdb:find:{imdb_id}"
        data = await self._cache.get(cache_key)
        if data is None:
            response = await request_with_retry(
                self._get_client(),
                "GET",
                f"/find/{imdb_id}",
                params={"language": self._language, "external_source": "imdb_id"},
            )
            data = response.json()
            await self._cache.set_details(cache_key, data)

        candidates = {
            ContentType.MOVIE: data.get("movie_results", []),
            ContentType.SERIES: data.get("tv_results", []),
        }
        order = [content_type] if content_type else [ContentType.MOVIE, ContentType.SERIES]
        for wanted in order:
            results = candidates[wanted]
            if results:
                return await self.get_details(str(results[0]["id"]), wanted)
        return None

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
