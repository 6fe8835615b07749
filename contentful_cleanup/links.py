"""Linked-entry lookups and the orphaned asset scan."""

import time
from typing import Dict, List

from .errors import InvalidArgument, RateLimited
from .models import AssetRecord
from .output import NullProgress

RATE_LIMIT_BACKOFF = 1  # seconds before retrying a rate-limited lookup
ORPHAN_SCAN_BATCH = 7  # pause after this many lookups
ORPHAN_SCAN_PAUSE = 1  # seconds


def count_links(client, asset_id: str) -> int:
    """Number of entries that link to the asset.

    If Contentful reports the per-second budget as spent, waits
    RATE_LIMIT_BACKOFF and repeats the lookup once. A second failure is
    raised to the caller.
    """
    if not asset_id or not isinstance(asset_id, str):
        raise InvalidArgument("An asset ID is required to count linked entries")

    try:
        page = client.get_linked_entries(asset_id)
    except RateLimited:
        time.sleep(RATE_LIMIT_BACKOFF)
        page = client.get_linked_entries(asset_id)

    return page.total


def is_orphaned(client, asset_id: str) -> bool:
    return count_links(client, asset_id) == 0


def find_orphaned_assets(client, assets: List[Dict], progress=None, logger=None) -> List[str]:
    """IDs of the assets no entry links to, in input order.

    Sleeps ORPHAN_SCAN_PAUSE after every ORPHAN_SCAN_BATCH lookups to stay
    under the CDA rate limit.
    """
    progress = progress or NullProgress()
    orphaned = []

    progress.start(len(assets))

    for i, item in enumerate(assets):
        asset_id = AssetRecord.from_item(item).asset_id

        if is_orphaned(client, asset_id):
            orphaned.append(asset_id)
            if logger:
                logger.log(f"Orphaned asset: {asset_id}")

        progress.increment(asset_id)

        if (i + 1) % ORPHAN_SCAN_BATCH == 0:
            time.sleep(ORPHAN_SCAN_PAUSE)

    progress.stop()

    return orphaned
