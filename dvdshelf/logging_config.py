"""
Journalisation de DVDShelf via loguru.

Deux destinations sont installées :
- stderr : format court et coloré, niveau réglable par -v / -q en CLI
- fichier : une ligne JSON par événement, avec rotation et compression zip

Le fichier reçoit toujours le niveau DEBUG, quel que soit le niveau console.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .config import Settings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> "
    "<level>{level: <8}</level> "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)

# Nombre de -v -> niveau console
_VERBOSE_LEVELS = {1: "DEBUG", 2: "TRACE"}


def console_level(base_level: str, verbose: int = 0, quiet: bool = False) -> str:
    """
    Détermine le niveau de la sortie console.

    -q (ERROR) l'emporte sur -v (DEBUG) et -vv (TRACE) ; sans option,
    le niveau configuré (DVDSHELF_LOG_LEVEL) s'applique.
    """
    if quiet:
        return "ERROR"
    if verbose:
        return _VERBOSE_LEVELS.get(min(verbose, 2), "DEBUG")
    return base_level.upper()


def _add_json_file(log_file: Path, rotation: str, retention: int) -> None:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation,
        retention=retention,
        compression="zip",
        enqueue=True,
    )


def configure_logging(settings: Settings, level: Optional[str] = None) -> None:
    """
    Remplace les handlers loguru par ceux de l'application.

    Args :
        settings : Paramètres de l'application (fichier, rotation, rétention)
        level : Niveau console imposé ; à défaut settings.log_level
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=level or settings.log_level.upper(),
        format=CONSOLE_FORMAT,
        colorize=True,
    )
    _add_json_file(
        settings.log_file, settings.log_rotation_size, settings.log_retention_count
    )
    logger.debug("Logging configuré", log_file=str(settings.log_file), level=level)
