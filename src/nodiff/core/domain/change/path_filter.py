def parse_path_filter(raw: str | None) -> tuple[str, ...]:
    """Split a space- or newline-delimited list of path patterns. Empty means every file."""
    if not raw:
        return ()
    return tuple(raw.split())
