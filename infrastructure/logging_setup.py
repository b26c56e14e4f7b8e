import logging
import os
import sys


def setup_logging(level: str | None = None, log_file: str | None = None) -> None:
    """
    Configura el logger raíz: consola siempre, archivo si hay LOG_FILE.

    Llamar una sola vez al arrancar; los handlers previos se reemplazan para
    no duplicar líneas.
    """
    level = (level or os.getenv("LOG_LEVEL", "info")).upper()
    log_file = log_file or os.getenv("LOG_FILE")

    root = logging.getLogger()
    root.setLevel(level)

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(fmt)
    root.addHandler(ch)

    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(fmt)
        root.addHandler(fh)

    # pymongo es muy ruidoso en DEBUG
    logging.getLogger("pymongo").setLevel(logging.WARNING)
