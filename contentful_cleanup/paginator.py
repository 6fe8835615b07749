"""Fetch a whole collection from an endpoint that only serves bounded pages."""

import math
from typing import Callable, List

from .models import Collection, Page
from .output import NullProgress

PageFetch = Callable[[int], Page]


def fetch_all(page_fetch: PageFetch, progress=None) -> Collection:
    """Walk every page of a list endpoint and return the items as one collection.

    The first page (skip=0) gives total and limit; the remaining pages are
    requested at skip=limit, 2*limit, ... until ceil(total / limit) calls have
    been made. Total is not re-checked, so the endpoint must keep a stable
    order (sys.createdAt) between calls. A FetchFailed from any page aborts
    the whole fetch.
    """
    progress = progress or NullProgress()

    first = page_fetch(0)
    total = first.total
    limit = first.limit
    page_count = math.ceil(total / limit) if limit > 0 else 0

    items: List = list(first.items)
    progress.start(max(page_count, 1))
    progress.increment()

    for page_number in range(1, page_count):
        page = page_fetch(page_number * limit)
        items.extend(page.items)
        progress.increment()

    progress.stop()

    return Collection(total=total, limit=limit, items=items)
