import logging
import sys

__all__ = ["setup_logging"]


def setup_logging(debug: bool = False) -> None:
    """
    Configure root logger for the table engine.

    Parameters
    ----------
    debug : bool
        If True, set logging level to DEBUG, otherwise INFO
    """
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
