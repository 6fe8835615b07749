"""Reading asset dumps and writing command output."""

import json
from typing import Any, Dict, List

from .errors import FileIOFailed


def read_assets(path: str) -> List[Dict]:
    """Items from a JSON dump written by get-assets"""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise FileIOFailed(f"Cannot read {path}: {e}", path=path, cause=e) from e
    except ValueError as e:
        raise FileIOFailed(f"{path} is not valid JSON: {e}", path=path, cause=e) from e

    if not isinstance(data, dict) or not isinstance(data.get("items"), list):
        raise FileIOFailed(f"{path} does not contain an 'items' list", path=path)

    return data["items"]


def write_json(path: str, data: Any):
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f)
    except OSError as e:
        raise FileIOFailed(f"Cannot write {path}: {e}", path=path, cause=e) from e


def write_text(path: str, text: str):
    try:
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(text)
    except OSError as e:
        raise FileIOFailed(f"Cannot write {path}: {e}", path=path, cause=e) from e
