"""
Fournisseurs de streams.

- Services debrid : RealDebridProvider, TorboxProvider, AllDebridProvider,
  PremiumizeProvider (bibliotheque de l'utilisateur)
- TorrentIndex : index torrent public, repli quand les services sont vides

Tous implementent IStreamProvider (core/ports/streams.py).
"""

from ottcatalog.adapters.streams.all_debrid import AllDebridProvider
from ottcatalog.adapters.streams.base import DebridProvider
from ottcatalog.adapters.streams.premiumize import PremiumizeProvider
from ottcatalog.adapters.streams.real_debrid import RealDebridProvider
from ottcatalog.adapters.streams.torbox import TorboxProvider
from ottcatalog.adapters.streams.torrent_index import TorrentIndex

__all__ = [
    "AllDebridProvider",
    "DebridProvider",
    "PremiumizeProvider",
    "RealDebridProvider",
    "TorboxProvider",
    "TorrentIndex",
]
