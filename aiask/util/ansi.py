import os, stat

ERASE_LINE = "\r\033[K"   # back to column 0, clear to end of line

def isatty(stream) -> bool:
    try:
        return bool(stream.isatty())
    except (AttributeError, ValueError):
        return False

def is_char_device(stream) -> bool:
    """True when the stream's descriptor is a character device (a tty, /dev/null)."""
    try:
        mode = os.fstat(stream.fileno()).st_mode
    except (AttributeError, OSError, ValueError):
        return True
    return stat.S_ISCHR(mode)
