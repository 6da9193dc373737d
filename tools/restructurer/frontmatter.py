from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, List

from .config import DESCRIPTION_PLACEHOLDER


def _as_list(v) -> List[Any]:
    if v is None:
        return []
    if isinstance(v, (list, tuple)):
        return list(v)
    return [v]


def _publish_date(v) -> str:
    if not v:
        return ""
    if isinstance(v, datetime):
        return v.date().isoformat()
    if isinstance(v, date):
        return v.isoformat()
    return str(v).split("T")[0]


def _merge_tags(*groups) -> List[Any]:
    seen = set()
    merged: List[Any] = []
    for group in groups:
        for tag in _as_list(group):
            key = str(tag)
            if key in seen:
                continue
            seen.add(key)
            merged.append(tag)
    return merged


def transform_frontmatter(data: Dict[str, Any], legacy: bool = False) -> Dict[str, Any]:
    """
    Map raw article frontmatter onto the output schema.

    The simple variant keeps the raw tags and fills ``description`` with a
    placeholder. The legacy (manifest) variant leaves ``description``
    empty, folds ``categories`` into ``tags`` and marks the post with
    ``legacy: true``. ``data`` is never modified.
    """
    data = data or {}
    fm: Dict[str, Any] = {
        "title": data.get("title") or "",
        "publishDate": _publish_date(data.get("date")),
    }
    if legacy:
        fm["description"] = ""
        fm["tags"] = _merge_tags(data.get("tags"), data.get("categories"))
        fm["legacy"] = True
    else:
        fm["description"] = DESCRIPTION_PLACEHOLDER
        fm["tags"] = _as_list(data.get("tags"))
    return fm
