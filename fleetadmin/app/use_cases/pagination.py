import math

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


def total_pages(total_count: int, limit: int) -> int:
    if limit <= 0:
        return 0
    return math.ceil(total_count / limit)
