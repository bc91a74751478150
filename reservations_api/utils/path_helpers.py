def path_matches(path: str, allowed_paths: set[str]) -> bool:
    """Check if path matches any allowed path, handling trailing slashes.

    Returns True if:
    - path exactly matches an allowed path, OR
    - path with trailing slash added/removed matches an allowed path

    Args:
        path: The request path to check
        allowed_paths: Set of allowed paths

    Returns:
        True if path matches any allowed path (with trailing slash handling)
    """
    if path in allowed_paths:
        return True

    if not path.endswith("/"):
        if path + "/" in allowed_paths:
            return True

    if path.endswith("/"):
        if path[:-1] in allowed_paths:
            return True

    return False
