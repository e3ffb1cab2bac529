"""
Configuration du logging de l'add-on via loguru.

Deux sorties :
- Console : lisible, colorée, avec les champs contextuels (url, platform, provider...)
- Fichier : JSON avec rotation, désactivable (log_file=None) pour les conteneurs
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level> <dim>{extra}</dim>"
)


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = Path("logs/ottcatalog.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure les handlers loguru de l'add-on.

    Args :
        log_level : Niveau minimum de la console (DEBUG, INFO, WARNING, ERROR)
        log_file : Fichier JSON (None = console uniquement)
        rotation_size : Taille avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs conservés

    Les champs passés en kwargs aux appels logger (logger.info("...", url=url))
    sont affichés en fin de ligne sur la console et sérialisés dans le fichier.
    """
    logger.remove()

    logger.add(sys.stderr, level=log_level.upper(), format=CONSOLE_FORMAT, colorize=True)

    if log_file is None:
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",  # Les requêtes sortantes et hits de cache sont en DEBUG
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )
    logger.debug("Logging configuré", log_file=str(log_file), level=log_level)
