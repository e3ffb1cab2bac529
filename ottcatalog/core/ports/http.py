"""
Port pour les recuperations HTTP sortantes memoisees.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class IFetcher(ABC):
    """
    Contrat du cache de recuperation HTTP.

    Les implementations ne levent jamais d'exception : toute erreur reseau,
    HTTP ou de timeout est journalisee et se traduit par None.
    """

    @abstractmethod
    async def fetch(self, url: str, **options: Any) -> Optional[Any]:
        """
        Recupere le corps d'une URL.

        Args :
            url : URL a recuperer
            **options : method, headers, params, json, timeout, response_type

        Retourne :
            Corps texte (ou JSON decode si response_type="json"), ou None
        """
        ...
