"""
Fixtures pytest partagees pour les tests OttCatalog.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test isoles de l'environnement
- Horloge manuelle pour les caches et le limiteur de debit
"""

from pathlib import Path

import pytest

from ottcatalog.config import Settings
from tests.fixtures.factories import ManualClock


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test sans cle API ni fichier .env.

    Les logs sont rediriges dans tmp_path.
    """
    return Settings(
        _env_file=None,
        tmdb_api_key=None,
        real_debrid_api_key=None,
        torbox_api_key=None,
        all_debrid_api_key=None,
        premiumize_api_key=None,
        enrichment_delay_seconds=0,
        log_file=tmp_path / "logs" / "test.log",
    )
