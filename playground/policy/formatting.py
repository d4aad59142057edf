_MAX_PLAIN_LENGTH = 20
_HEAD = 6
_TAIL = 4
_ELLIPSIS = "..."


def format_value(value: str) -> str:
    """Shorten long values for compact display, e.g. ``0x742d...0bEb``.

    Values of up to 20 characters are returned unchanged.
    """
    if len(value) > _MAX_PLAIN_LENGTH:
        return f"{value[:_HEAD]}{_ELLIPSIS}{value[-_TAIL:]}"
    return value


def is_shortened(value: str) -> bool:
    return len(value) > _MAX_PLAIN_LENGTH
