"""Utility for splitting slash-delimited workspace paths into segments."""

PATH_SEPARATOR = "/"


def parse_path(path: str) -> list[str]:
    """Split a path into its non-empty segments.

    Leading, trailing and repeated separators are tolerated, so ``""``,
    ``"/"`` and ``"//"`` all denote the root.
    """
    return [member for member in path.split(PATH_SEPARATOR) if member]
