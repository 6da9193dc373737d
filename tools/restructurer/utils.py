from __future__ import annotations

import hashlib
import pathlib
import secrets
import string
import unicodedata
from typing import Any, Dict, Tuple

import yaml

from .config import (
    FALLBACK_SUFFIX_LEN,
    SLUG_SPACE_RE,
    SLUG_STRIP_RE,
)
from .errors import FrontmatterError

_SUFFIX_ALPHABET = string.ascii_lowercase + string.digits


def slugify(s) -> str:
    s = unicodedata.normalize("NFKD", str(s))
    s = SLUG_STRIP_RE.sub("", s).strip()
    return SLUG_SPACE_RE.sub("-", s).lower()


def random_suffix(length: int = FALLBACK_SUFFIX_LEN) -> str:
    return "".join(secrets.choice(_SUFFIX_ALPHABET) for _ in range(length))


def ensure_dir(p: pathlib.Path) -> None:
    p.mkdir(parents=True, exist_ok=True)


def content_hash(path: pathlib.Path) -> str:
    return hashlib.sha256(path.read_bytes()).hexdigest()[:16]


def _strip_bom(s: str) -> str:
    return s.lstrip('\ufeff')


def yaml_frontmatter_block(data: Dict[str, Any]) -> str:
    """Dump ``data`` as a fenced YAML block; long values are never wrapped."""
    dumped = yaml.safe_dump(
        dict(data), sort_keys=False, allow_unicode=True, width=float("inf")
    ).rstrip()
    return f"---\n{dumped}\n---\n"


def parse_frontmatter(text: str, path=None) -> Tuple[Dict[str, Any], str]:
    """
    Split ``text`` into (frontmatter, body).

    Documents without a leading ``---`` fence, or whose fence is never
    closed, have empty frontmatter and the whole text as body. Fences may
    end in ``\\n`` or ``\\r\\n``; the body slice keeps its line endings so
    it can be written back byte for byte.
    """
    if not text.startswith("---\n") and not text.startswith("---\r\n"):
        return {}, text

    lines = text.splitlines(keepends=True)
    for i in range(1, len(lines)):
        if lines[i].strip() == "---":
            fm_text = "".join(lines[1:i])
            body = "".join(lines[i + 1 :])
            try:
                fm = yaml.safe_load(fm_text)
            except (yaml.YAMLError, ValueError) as exc:
                # bad timestamps such as 2024-13-45 raise ValueError
                raise FrontmatterError(path, f"invalid YAML: {exc}") from exc
            if fm is None:
                fm = {}
            if not isinstance(fm, dict):
                raise FrontmatterError(
                    path, f"expected a mapping, got {type(fm).__name__}"
                )
            return fm, body
    return {}, text


def read_markdown(path: pathlib.Path) -> Tuple[Dict[str, Any], str]:
    with path.open(encoding="utf-8", newline="") as fh:
        text = _strip_bom(fh.read())
    return parse_frontmatter(text, path)
