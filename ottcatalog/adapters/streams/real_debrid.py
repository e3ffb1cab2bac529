"""
Fournisseur Real-Debrid (API REST 1.0).

Parcours :
1. GET /torrents : torrents de la bibliotheque, filtres sur le titre
2. GET /torrents/info/{id} : fichiers selectionnes et liens associes
3. POST /unrestrict/link : lien de telechargement direct
"""

from ottcatalog.adapters.streams.base import MAX_TORRENTS, DebridProvider
from ottcatalog.core.entities.content import StreamRecord
from ottcatalog.core.ports.streams import StreamQuery


class RealDebridProvider(DebridProvider):

    BASE_URL = "https://api.real-debrid.com/rest/1.0"
    LABEL = "Real Debrid"

    @property
    def name(self) -> str:
        return "realDebrid"

    async def _search(self, query: StreamQuery) -> list[StreamRecord]:
        client = self._get_client()
        response = await client.get("/torrents", params={"limit": 100})
        response.raise_for_status()

        torrents = [
            t for t in response.json() or []
            if t.get("status") == "downloaded" and self.matches_title(t.get("filename"), query)
        ]

        streams: list[StreamRecord] = []
        for torrent in torrents[:MAX_TORRENTS]:
            info = await client.get(f"/torrents/info/{torrent['id']}")
            info.raise_for_status()
            data = info.json()

            # Les liens correspondent, dans l'ordre, aux fichiers selectionnes
            selected = [f for f in data.get("files", []) if f.get("selected")]
            for file, link in zip(selected, data.get("links", [])):
                filename = file.get("path", "").rsplit("/", 1)[-1]
                if not self.accepts_file(filename, query):
                    continue
                unrestricted = await client.post("/unrestrict/link", data={"link": link})
                unrestricted.raise_for_status()
                download = unrestricted.json().get("download")
                if download:
                    streams.append(self._record(download, filename, str(torrent["id"])))
        return streams
