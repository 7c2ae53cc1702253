TRUE_VALUES = frozenset(["1", "t", "true", "y", "yes", "on"])


def to_bool(value: str) -> bool:
    """Leniently coerce a textual flag to a boolean.

    Unrecognized text, including the empty string, is False.
    """
    return value.strip().lower() in TRUE_VALUES
