"""
Fournisseur TorBox (API v1).

GET /torrents/mylist liste la bibliotheque avec ses fichiers ;
GET /torrents/requestdl produit le lien de telechargement d'un fichier.
"""

from ottcatalog.adapters.streams.base import MAX_TORRENTS, DebridProvider
from ottcatalog.core.entities.content import StreamRecord
from ottcatalog.core.ports.streams import StreamQuery


class TorboxProvider(DebridProvider):

    BASE_URL = "https://api.torbox.app/v1/api"
    LABEL = "Torbox"

    @property
    def name(self) -> str:
        return "torbox"

    async def _search(self, query: StreamQuery) -> list[StreamRecord]:
        client = self._get_client()
        response = await client.get("/torrents/mylist")
        response.raise_for_status()

        torrents = [
            t for t in response.json().get("data") or []
            if self.matches_title(t.get("name"), query)
        ]

        streams: list[StreamRecord] = []
        for torrent in torrents[:MAX_TORRENTS]:
            for file in torrent.get("files") or []:
                filename = file.get("short_name") or file.get("name", "").rsplit("/", 1)[-1]
                if not self.accepts_file(filename, query):
                    continue
                link = await client.get(
                    "/torrents/requestdl",
                    params={
                        "token": self._api_key,
                        "torrent_id": torrent["id"],
                        "file_id": file["id"],
                    },
                )
                link.raise_for_status()
                url = link.json().get("data")
                if url:
                    streams.append(self._record(url, filename, str(torrent["id"])))
        return streams
