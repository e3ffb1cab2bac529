"""
Fournisseur AllDebrid (API v4).

GET /magnet/status liste les magnets de l'utilisateur avec leurs liens ;
GET /link/unlock debride un lien.
"""

from ottcatalog.adapters.streams.base import MAX_TORRENTS, DebridProvider
from ottcatalog.core.entities.content import StreamRecord
from ottcatalog.core.ports.streams import StreamQuery

AGENT = "ottcatalog"


class AllDebridProvider(DebridProvider):

    BASE_URL = "https://api.alldebrid.com/v4"
    LABEL = "AllDebrid"

    @property
    def name(self) -> str:
        return "allDebrid"

    def _params(self, **extra) -> dict:
        return {"agent": AGENT, "apikey": self._api_key, **extra}

    async def _search(self, query: StreamQuery) -> list[StreamRecord]:
        client = self._get_client()
        response = await client.get("/magnet/status", params=self._params(status="ready"))
        response.raise_for_status()
        payload = response.json()
        if payload.get("status") != "success":
            raise ValueError(payload.get("error", {}).get("message", "AllDebrid error"))

        magnets = [
            m for m in payload.get("data", {}).get("magnets") or []
            if self.matches_title(m.get("filename"), query)
        ]

        streams: list[StreamRecord] = []
        for magnet in magnets[:MAX_TORRENTS]:
            for link in magnet.get("links") or []:
                filename = link.get("filename", "")
                if not self.accepts_file(filename, query):
                    continue
                unlocked = await client.get("/link/unlock", params=self._params(link=link["link"]))
                unlocked.raise_for_status()
                url = (unlocked.json().get("data") or {}).get("link")
                if url:
                    streams.append(self._record(url, filename, str(magnet["id"])))
        return streams
