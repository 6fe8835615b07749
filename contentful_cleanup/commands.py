"""The cleanup commands: asset dump, asset details report, orphan report."""

from typing import Dict, List, Optional

from .client import ContentfulClient
from .config import ContentfulConfig
from .csv_table import CsvTable
from .errors import InvalidArgument
from .links import count_links, find_orphaned_assets
from .log import CleanupLogger
from .models import AssetRecord, UserDirectory
from .output import ProgressBar, print_header, print_info, print_subheader, print_success
from .paginator import fetch_all
from .storage import read_assets, write_json, write_text

DETAIL_COLUMNS = [
    "Asset ID",
    "Asset Title",
    "Filename",
    "Content Type",
    "Published At",
    "Updated At",
    "Created At",
    "Count of Linked Entries",
]
AUTHOR_COLUMN = "Author"
ORPHAN_COLUMNS = ["Asset ID"]

# ============================================
# HELPERS
# ============================================

def build_table(column_names: List[str]) -> CsvTable:
    table = CsvTable()
    for order, name in enumerate(column_names, start=1):
        table.add_column(name, order)
    return table


def check_max(max_count: Optional[int]) -> Optional[int]:
    if max_count is None:
        return None
    if isinstance(max_count, bool) or not isinstance(max_count, int) or max_count < 1:
        raise InvalidArgument(f"--max must be a positive integer, got {max_count!r}")
    return max_count


def load_assets(client: ContentfulClient, logger: CleanupLogger,
                input_file: Optional[str] = None, max_count: Optional[int] = None) -> List[Dict]:
    """Assets from an earlier dump, or fetched live, capped at max_count"""
    max_count = check_max(max_count)

    if input_file:
        print_info(f"Reading assets from {input_file}")
        assets = read_assets(input_file)
        logger.log(f"Read {len(assets)} assets from {input_file}")
    else:
        print_info("Fetching assets from Contentful...")
        assets = fetch_all(client.get_assets, ProgressBar("Fetching asset pages")).items
        logger.log(f"Fetched {len(assets)} assets from Contentful")

    if max_count is not None:
        assets = assets[:max_count]

    return assets


def detail_row(record: AssetRecord, linked_entries: int, users: Optional[UserDirectory] = None):
    cells = [
        ("Asset ID", record.asset_id),
        ("Asset Title", record.title),
        ("Filename", record.file_name),
        ("Content Type", record.content_type),
        ("Published At", record.published_at),
        ("Updated At", record.updated_at),
        ("Created At", record.created_at),
        ("Count of Linked Entries", linked_entries),
    ]
    if users is not None:
        cells.append((AUTHOR_COLUMN, users.name_for(record.created_by)))
    return cells

# ============================================
# COMMANDS
# ============================================

def get_assets(client: ContentfulClient, config: ContentfulConfig, logger: CleanupLogger,
               output_file: str) -> int:
    """Dump every asset in the environment to a JSON file"""

    print_header("GET ASSETS")
    print_info(f"Space: {config.space_id}  Environment: {config.environment_id}")
    logger.log("Fetching all assets")

    assets = fetch_all(client.get_assets, ProgressBar("Fetching asset pages"))

    print_success(f"Found {len(assets.items)} items")
    logger.log(f"Fetched {len(assets.items)} of {assets.total} assets")

    write_json(output_file, assets.to_json())
    print_success(f"Saved assets to {output_file}")
    logger.log(f"Wrote {output_file}")

    return len(assets.items)


def get_asset_details(client: ContentfulClient, config: ContentfulConfig, logger: CleanupLogger,
                      output_file: str, input_file: Optional[str] = None,
                      max_count: Optional[int] = None, with_author: bool = False) -> CsvTable:
    """Write a CSV row per asset with its metadata and linked entry count"""

    print_header("GET ASSET DETAILS")
    assets = load_assets(client, logger, input_file, max_count)

    users = None
    columns = list(DETAIL_COLUMNS)
    if with_author:
        print_info("Fetching users from Contentful...")
        users = UserDirectory(fetch_all(client.get_users, ProgressBar("Fetching user pages")).items)
        logger.log(f"Fetched {len(users.users)} users")
        columns.append(AUTHOR_COLUMN)

    table = build_table(columns)

    print_subheader(f"Counting linked entries for {len(assets)} assets")
    progress = ProgressBar()
    progress.start(len(assets))

    for item in assets:
        record = AssetRecord.from_item(item, config.locale)
        linked_entries = count_links(client, record.asset_id)
        table.add_row(detail_row(record, linked_entries, users))
        logger.log(f"Asset {record.asset_id}: {linked_entries} linked entries")
        progress.increment(record.asset_id)

    progress.stop()

    write_text(output_file, table.render())
    print_success(f"Saved details for {len(table.rows)} assets to {output_file}")
    logger.log(f"Wrote {output_file}")

    return table


def find_orphaned(client: ContentfulClient, config: ContentfulConfig, logger: CleanupLogger,
                  output_file: str, input_file: Optional[str] = None,
                  max_count: Optional[int] = None) -> List[str]:
    """Write a single-column CSV of assets that no entry links to"""

    print_header("FIND ORPHANED ASSETS")
    assets = load_assets(client, logger, input_file, max_count)

    print_subheader(f"Checking {len(assets)} assets")
    orphaned = find_orphaned_assets(client, assets, ProgressBar(), logger)

    table = build_table(ORPHAN_COLUMNS)
    for asset_id in orphaned:
        table.add_row([("Asset ID", asset_id)])

    write_text(output_file, table.render())
    print_success(f"Found {len(orphaned)} orphaned assets out of {len(assets)}")
    print_success(f"Saved orphaned assets to {output_file}")
    logger.log(f"Found {len(orphaned)} orphaned assets, wrote {output_file}")

    return orphaned
