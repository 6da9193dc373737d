from __future__ import annotations

import pathlib
import sys
from typing import Callable, List

from pydantic import TypeAdapter, ValidationError

from .config import MD_SUFFIX, SKIP_FILE_NAME, RunConfig
from .errors import FrontmatterError, ManifestError
from .models import PlanResult, TaskError, TaskRecord
from .paths import resolve_output_dir
from .utils import ensure_dir, random_suffix, read_markdown

_TASKS = TypeAdapter(list[TaskRecord])


def discover_markdown(input_root: pathlib.Path) -> List[pathlib.Path]:
    """
    All Markdown files under ``input_root`` except section ``_index.md``
    pages. Hidden files and anything below a dot-directory (``.git``,
    ``.obsidian``) are ignored.
    """
    root = pathlib.Path(input_root)
    found = []
    for p in sorted(root.rglob(f"*{MD_SUFFIX}")):
        if not p.is_file():
            continue
        if any(part.startswith(".") for part in p.relative_to(root).parts):
            continue
        if p.name == SKIP_FILE_NAME:
            continue
        found.append(p.resolve())
    return found


def plan_task(
    md: pathlib.Path,
    config: RunConfig,
    suffix_factory: Callable[[], str] = random_suffix,
) -> TaskRecord:
    fm, _ = read_markdown(md)
    out_dir = resolve_output_dir(
        fm.get("slug"),
        md,
        config.output_dir,
        degenerate=config.degenerate_slugs,
        suffix_factory=suffix_factory,
    )
    return TaskRecord(
        file_path=md,
        file_name=md.name,
        src_dir=md.parent,
        out_dir=out_dir,
    )


def plan_tasks(
    config: RunConfig,
    suffix_factory: Callable[[], str] = random_suffix,
) -> PlanResult:
    result = PlanResult()
    for md in discover_markdown(config.input_dir):
        try:
            result.tasks.append(plan_task(md, config, suffix_factory))
        except (FrontmatterError, OSError, UnicodeDecodeError) as exc:
            print(f"! skipping {md}: {exc}", file=sys.stderr)
            result.errors.append(TaskError(file=str(md), error=str(exc)))
    return result


def write_manifest(tasks: List[TaskRecord], path: pathlib.Path) -> None:
    ensure_dir(path.parent)
    data = _TASKS.dump_json(tasks, by_alias=True, indent=2)
    path.write_bytes(data + b"\n")
    print(f"✓ wrote {len(tasks)} tasks to {path}")


def read_manifest(path: pathlib.Path) -> List[TaskRecord]:
    if not path.exists():
        raise ManifestError(f"{path} not found; plan the tasks first")
    if not path.is_file():
        raise ManifestError(f"{path} is not a file")
    try:
        return _TASKS.validate_json(path.read_bytes())
    except ValidationError as exc:
        raise ManifestError(f"{path} is not a valid task list: {exc}") from exc
