"""Data classes for pages, collections and the records projected into reports."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .config import DEFAULT_LOCALE

NOT_AVAILABLE = "N/A"

# ============================================
# PAGINATION
# ============================================

@dataclass
class Page:
    """One response from a Contentful list endpoint"""
    total: int
    limit: int
    skip: int = 0
    items: List[Dict] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Dict) -> "Page":
        return cls(
            total=int(data.get("total", 0) or 0),
            limit=int(data.get("limit", 0) or 0),
            skip=int(data.get("skip", 0) or 0),
            items=list(data.get("items", []) or []),
        )


@dataclass(frozen=True)
class Collection:
    """Every item of a paginated endpoint, in page order"""
    total: int
    limit: int
    items: List[Dict] = field(default_factory=list)

    def to_json(self) -> Dict[str, Any]:
        return {"total": self.total, "limit": self.limit, "items": list(self.items)}

# ============================================
# ASSETS
# ============================================

def _localized(value: Any, locale: str) -> Any:
    """Pick the locale's value from a CMA field, or take a CDA field as-is"""
    if isinstance(value, dict) and locale in value:
        return value[locale]
    return value


def _text(value: Any) -> str:
    if value is None or isinstance(value, (dict, list)):
        return ""
    return str(value)


@dataclass(frozen=True)
class AssetRecord:
    """The fields of a Contentful asset that the reports use.

    Every field defaults to an empty string when the remote record does not
    carry it, so rows can be built without any further checks.
    """
    asset_id: str = ""
    title: str = ""
    file_name: str = ""
    content_type: str = ""
    published_at: str = ""
    updated_at: str = ""
    created_at: str = ""
    created_by: str = ""

    @classmethod
    def from_item(cls, item: Dict, locale: str = DEFAULT_LOCALE) -> "AssetRecord":
        if not isinstance(item, dict):
            return cls()

        sys = item.get("sys") or {}
        fields = item.get("fields") or {}

        file_info = _localized(fields.get("file"), locale)
        if not isinstance(file_info, dict):
            file_info = {}

        created_by = sys.get("createdBy") or {}
        creator_id = (created_by.get("sys") or {}).get("id", "") if isinstance(created_by, dict) else ""

        return cls(
            asset_id=_text(sys.get("id")),
            title=_text(_localized(fields.get("title"), locale)),
            file_name=_text(file_info.get("fileName")),
            content_type=_text(file_info.get("contentType")),
            published_at=_text(sys.get("publishedAt")),
            updated_at=_text(sys.get("updatedAt")),
            created_at=_text(sys.get("createdAt")),
            created_by=_text(creator_id),
        )

# ============================================
# USERS
# ============================================

class UserDirectory:
    """Users of a space, looked up by id in fetch order"""

    def __init__(self, users: List[Dict]):
        self.users = list(users)

    def name_for(self, user_id: str) -> str:
        if not user_id:
            return NOT_AVAILABLE

        for user in self.users:
            if (user.get("sys") or {}).get("id") == user_id:
                name = f"{user.get('firstName') or ''} {user.get('lastName') or ''}".strip()
                return name or NOT_AVAILABLE

        return NOT_AVAILABLE
