#!/usr/bin/env python3
from __future__ import annotations

import pathlib
import re

from pydantic import BaseModel, ConfigDict

# ---------- Paths

# This assumes config.py sits in tools/restructurer/ at the repo root
# (in-repo or editable installs; elsewhere pass absolute paths).
ROOT = pathlib.Path(__file__).resolve().parents[2]
INPUT_DIR_NAME = "articles"
OUTPUT_DIR_NAME = "output"
MANIFEST_NAME = "tasks.json"

# ---------- Config

MD_SUFFIX = ".md"
SKIP_FILE_NAME = "_index.md"
RESERVED_NAME = "output"
FALLBACK_PREFIX = "untitled-"
FALLBACK_SUFFIX_LEN = 6
DESCRIPTION_PLACEHOLDER = "Please write a short summary here."

# Slugs that never name a folder in the manifest variant.
LEGACY_DEGENERATE_SLUGS = ("index",)

# Some shared regexes

SLUG_STRIP_RE = re.compile(r"[^\w\- ]+", re.ASCII)
SLUG_SPACE_RE = re.compile(r"\s+", re.ASCII)


class RunConfig(BaseModel):
    """Settings for one planner/executor run, built once by the CLI."""

    model_config = ConfigDict(frozen=True)

    input_dir: pathlib.Path
    output_dir: pathlib.Path
    manifest_path: pathlib.Path = ROOT / MANIFEST_NAME
    legacy: bool = False
    jobs: int = 1

    @property
    def degenerate_slugs(self) -> tuple[str, ...]:
        return LEGACY_DEGENERATE_SLUGS if self.legacy else ()


def resolve_from_root(value: str | pathlib.Path) -> pathlib.Path:
    return (ROOT / value).resolve()
