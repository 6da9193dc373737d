from __future__ import annotations

import pathlib
from typing import Callable, Iterable, Optional

from .config import FALLBACK_PREFIX, RESERVED_NAME
from .utils import random_suffix, slugify


def resolve_output_dir(
    slug: Optional[str],
    source_path: pathlib.Path,
    output_root: pathlib.Path,
    *,
    degenerate: Iterable[str] = (),
    suffix_factory: Callable[[], str] = random_suffix,
) -> pathlib.Path:
    """
    Returns the folder an article is written to.

    Convention:
    - The frontmatter slug names the folder, unless it is empty or listed
      in ``degenerate``; then the source file's parent folder name is used.
    - The name is slugified. An empty result, or one equal to the reserved
      output name (any case), becomes ``untitled-<random>``.
    """
    if slug and str(slug) not in degenerate:
        raw_name = str(slug)
    else:
        raw_name = pathlib.Path(source_path).parent.name
    safe_name = slugify(raw_name or "")

    if not safe_name or safe_name.lower() == RESERVED_NAME:
        safe_name = f"{FALLBACK_PREFIX}{suffix_factory()}"

    return pathlib.Path(output_root).resolve() / safe_name
