from logging.config import dictConfig

from fromasync.utils.env import getenv_bool

__all__ = ("setup_logging",)


def setup_logging(
    *loggers: str,
    time: bool = True,
    debug: bool | None = None,
    disable_existing_loggers: bool = True,
) -> None:
    """\
    Setup logging configuration for the fromasync logger and additional loggers.

    Records emitted by materialize (start and finish of each call, DEBUG level)
    are delivered through the fromasync logger to the configured console handler.

    Parameters
    ----------
    *loggers: str
        names of additional loggers to configure.
    time: bool = True
        include timestamps in logs (emits local timezone offset).
    debug: bool | None = None
        include debug logs, when not provided read from FROMASYNC_DEBUG
        environment variable falling back to __debug__.
    disable_existing_loggers: bool = True
        disable other loggers which were created before calling the setup.

    NOTE: this function should be run only once on application start
    """
    if debug is None:
        debug = getenv_bool("FROMASYNC_DEBUG", __debug__)

    level: str = "DEBUG" if debug else "INFO"

    dictConfig(
        config={
            "version": 1,
            "disable_existing_loggers": disable_existing_loggers,
            "formatters": {
                "standard": {
                    "format": "%(asctime)s [%(levelname)-4s] [%(name)s] %(message)s",
                    "datefmt": "%d/%b/%Y:%H:%M:%S %z",
                }
                if time
                else {
                    "format": "[%(levelname)-4s] [%(name)s] %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "level": level,
                    "formatter": "standard",
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                name: {
                    "handlers": ["console"],
                    "level": level,
                    "propagate": False,
                }
                for name in ("fromasync", *loggers)
            },
            "root": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
        },
    )
