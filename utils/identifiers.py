def parse_id(value: str) -> int | None:
    """
    Primary key from a path segment, or None when it is not an integer.

    No row can match a non-numeric id, so callers treat None as "not found"
    rather than as a malformed request.
    """
    try:
        return int(value)
    except ValueError:
        return None
