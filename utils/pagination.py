from typing import Any


def parse_page(raw: Any) -> int:
    """Page number from a query value; anything missing, non-numeric or below 1 is page 1."""
    try:
        page = int(raw)
    except (TypeError, ValueError):
        return 1
    return page if page >= 1 else 1
