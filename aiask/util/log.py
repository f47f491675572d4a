import logging, sys

FORMAT = "%(levelname)s %(name)s: %(message)s"

def setup_logging(level: str = "WARNING") -> None:
    """Point the package logger at the current stderr; unknown level names mean WARNING."""
    lvl = logging.getLevelName(str(level).upper())
    if not isinstance(lvl, int):
        lvl = logging.WARNING
    root = logging.getLogger("aiask")
    root.setLevel(lvl)
    for h in [h for h in root.handlers if getattr(h, "_aiask", False)]:
        root.removeHandler(h)
    h = logging.StreamHandler(sys.stderr)
    h.setFormatter(logging.Formatter(FORMAT))
    h._aiask = True
    root.addHandler(h)
