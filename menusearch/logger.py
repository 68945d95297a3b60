'''
Module de configuration du logger de la bibliothèque.

menusearch est chargé dans le processus de l'application hôte : à l'import, on
se contente de désactiver ses logs Loguru, sans toucher aux handlers de l'hôte.
L'application qui veut la sortie console (avec couleurs) et les fichiers
rotatifs appelle configure_logging().
'''

import os
import sys

from loguru import logger

from menusearch.config import Settings, settings

# Logs de la bibliothèque muets tant que l'hôte ne les active pas
logger.disable("menusearch")

LOG_FORMAT_CONSOLE = (
    "<white>{time:YYYY-MM-DD HH:mm:ss.SSS}</white> | "
    "<level>{level: <8}</level> | "
    "<light-black>{name}:{function}:{line}</light-black> - "
    "<level><b>{message}</b></level>"
)
LOG_FORMAT_FILE = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
    "{level: <8} | "
    "{name}:{function}:{line} - "
    "{message}"
)


def configure_logging(config: Settings = settings) -> None:
    """
    Configure Loguru pour une application qui utilise menusearch seule.

    Remplace tous les handlers existants : à n'appeler que depuis le point
    d'entrée de l'application, jamais depuis une bibliothèque.

    Args:
        config: Les settings (LOG_LEVEL, LOG_DIR)
    """
    # 1. Supprimer les handlers existants pour éviter les doublons
    logger.remove()

    # 2. Sortie console (stderr)
    logger.add(
        sys.stderr,
        level=config.LOG_LEVEL,
        format=LOG_FORMAT_CONSOLE,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )

    # 3. Fichiers : rotation journalière, conservation de 30 jours, compression.
    if config.LOG_DIR:
        os.makedirs(config.LOG_DIR, exist_ok=True)

        logger.add(
            os.path.join(config.LOG_DIR, "debug.log"),
            level="DEBUG",
            format=LOG_FORMAT_FILE,
            rotation="00:00",
            retention="30 days",
            compression="zip",
            encoding="utf-8",
            filter=lambda record: record["level"].name == "DEBUG",
        )

        logger.add(
            os.path.join(config.LOG_DIR, "info.log"),
            level="INFO",
            format=LOG_FORMAT_FILE,
            rotation="00:00",
            retention="30 days",
            compression="zip",
            encoding="utf-8",
            filter=lambda record: record["level"].name in ("INFO", "WARNING"),
        )

        logger.add(
            os.path.join(config.LOG_DIR, "error.log"),
            level="ERROR",
            format=LOG_FORMAT_FILE,
            rotation="00:00",
            retention="30 days",
            compression="zip",
            encoding="utf-8",
            backtrace=True,
            diagnose=True,
        )

    logger.enable("menusearch")


# Exemple d'utilisation côté application :
# from menusearch.logger import configure_logging
# configure_logging()
#
# Ou, si l'application a déjà ses propres handlers Loguru :
# from loguru import logger
# logger.enable("menusearch")
