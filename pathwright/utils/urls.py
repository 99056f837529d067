"""
URL utilities for pathwright.
"""

def join_paths(*parts: str) -> str:
    """
    Robustly join URL path segments.

    Handles:
    - Multiple slashes (//) -> /
    - Trailing/leading slashes
    - Empty segments

    Example:
        join_paths("/app/", "/static", "css/site.css") -> "/app/static/css/site.css"
    """
    clean_parts = []

    for part in parts:
        if not part:
            continue

        clean = part.strip("/")

        if clean:
            clean_parts.append(clean)

    joined = "/" + "/".join(clean_parts)

    # Preserve trailing slash of the last part, except for the root
    if parts and parts[-1].endswith("/") and joined != "/":
        joined += "/"

    return joined


def clean_uri(request_uri: str, base_uri: str = "/") -> str:
    """
    Reduce a request URI to the path routes are matched against.

    Drops the query string and the application's base URI, trims
    surrounding slashes and returns the rest with a single leading slash.

    Example:
        clean_uri("/app/users/5/?tab=posts", "/app/") -> "/users/5"
    """
    path = request_uri.split("?", 1)[0].split("#", 1)[0]

    if base_uri and path.startswith(base_uri):
        path = path[len(base_uri):]
    elif base_uri and path == base_uri.rstrip("/"):
        path = ""

    return "/" + path.strip("/")
