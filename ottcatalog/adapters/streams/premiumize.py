"""
Fournisseur Premiumize.

GET /item/listall retourne tous les fichiers du cloud de l'utilisateur
avec un lien direct : aucun appel de debridage supplementaire.
"""

from ottcatalog.adapters.streams.base import DebridProvider
from ottcatalog.core.entities.content import StreamRecord
from ottcatalog.core.ports.streams import StreamQuery


class PremiumizeProvider(DebridProvider):

    BASE_URL = "https://www.premiumize.me/api"
    LABEL = "Premiumize"

    @property
    def name(self) -> str:
        return "premiumize"

    async def _search(self, query: StreamQuery) -> list[StreamRecord]:
        response = await self._get_client().get("/item/listall", params={"apikey": self._api_key})
        response.raise_for_status()
        payload = response.json()
        if payload.get("status") != "success":
            raise ValueError(payload.get("message", "Premiumize error"))

        streams: list[StreamRecord] = []
        for file in payload.get("files") or []:
            filename = file.get("name", "")
            path = file.get("path") or filename
            if not self.matches_title(path, query) or not self.accepts_file(filename, query):
                continue
            url = file.get("link") or file.get("stream_link")
            if url:
                streams.append(self._record(url, filename, str(file.get("id", filename))))
        return streams
