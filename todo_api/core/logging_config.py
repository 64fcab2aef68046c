"""
➡️ But : Configurer le logging du process et la politique sur les exceptions non gérées.

Chaque module déclare son propre logger : logger = logging.getLogger(__name__)

Toute exception non gérée (thread principal, threads, boucle asyncio) est logguée
puis termine le process. Pas de redémarrage automatique : c'est le rôle du superviseur externe.
"""

import logging
import os
import sys
import threading

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def _terminate() -> None:
    logging.shutdown()
    os._exit(1)


def _log_uncaught(exc_type, exc_value, exc_tb) -> None:
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_tb)
        return
    logger.critical("Uncaught exception", exc_info=(exc_type, exc_value, exc_tb))


def _log_uncaught_in_thread(args: threading.ExceptHookArgs) -> None:
    if args.exc_type is SystemExit:
        return
    logger.critical(
        "Uncaught exception in thread %s",
        args.thread.name if args.thread else "?",
        exc_info=(args.exc_type, args.exc_value, args.exc_traceback),
    )
    _terminate()


def handle_loop_exception(loop, context: dict) -> None:
    """
    Handler asyncio (loop.set_exception_handler) : exceptions de tâches jamais récupérées,
    callbacks en échec...
    """
    exc = context.get("exception")
    logger.critical(
        "Unhandled asyncio error: %s",
        context.get("message", "unknown"),
        exc_info=(type(exc), exc, exc.__traceback__) if exc else None,
    )
    _terminate()


def install_excepthooks() -> None:
    """Hooks sys + threading ; la boucle asyncio reçoit handle_loop_exception au démarrage du serveur."""
    sys.excepthook = _log_uncaught
    threading.excepthook = _log_uncaught_in_thread
