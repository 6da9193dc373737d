from __future__ import annotations

import concurrent.futures
import pathlib
import shutil
import sys
from typing import List, Tuple

from .config import MD_SUFFIX, RunConfig
from .errors import FrontmatterError
from .frontmatter import transform_frontmatter
from .models import RunReport, TaskError, TaskRecord
from .utils import content_hash, ensure_dir, read_markdown, yaml_frontmatter_block


def process_markdown(task: TaskRecord, legacy: bool = False) -> pathlib.Path:
    fm, body = read_markdown(task.file_path)
    new_fm = transform_frontmatter(fm, legacy=legacy)

    ensure_dir(task.out_dir)
    out_path = task.out_dir / task.file_name
    out_path.write_text(
        yaml_frontmatter_block(new_fm) + body, encoding="utf-8", newline=""
    )
    print(f"✓ converted {task.file_path} → {out_path}")
    return out_path


def copy_sibling_assets(task: TaskRecord) -> int:
    """Copy every non-Markdown file next to the source into its output folder."""
    copied = 0
    for entry in sorted(task.src_dir.iterdir()):
        if not entry.is_file():
            continue
        if entry.name == task.file_name or entry.name.endswith(MD_SUFFIX):
            continue
        dest = task.out_dir / entry.name
        if dest.exists() and content_hash(dest) == content_hash(entry):
            print(f"= {dest} unchanged, skip")
            continue
        shutil.copyfile(entry, dest)
        print(f"+ copied {entry} → {dest}")
        copied += 1
    return copied


def run_task(task: TaskRecord, legacy: bool = False) -> Tuple[int, int]:
    process_markdown(task, legacy=legacy)
    return 1, copy_sibling_assets(task)


def execute_tasks(tasks: List[TaskRecord], config: RunConfig) -> RunReport:
    """
    Run every task and collect a report.

    A failing task is recorded and the rest still run. With
    ``config.jobs > 1`` tasks are fanned out over a thread pool in no
    particular order; each one writes only its own output folder.
    """
    report = RunReport()

    def _record(task: TaskRecord, exc: Exception) -> None:
        print(f"! failed {task.file_path}: {exc}", file=sys.stderr)
        report.errors.append(TaskError(file=str(task.file_path), error=str(exc)))

    def _tally(counts: Tuple[int, int]) -> None:
        report.converted += counts[0]
        report.copied += counts[1]

    if config.jobs <= 1:
        for task in tasks:
            try:
                _tally(run_task(task, config.legacy))
            except (FrontmatterError, OSError, UnicodeDecodeError) as exc:
                _record(task, exc)
        return report

    with concurrent.futures.ThreadPoolExecutor(max_workers=config.jobs) as pool:
        futures = {
            pool.submit(run_task, task, config.legacy): task for task in tasks
        }
        for future in concurrent.futures.as_completed(futures):
            try:
                _tally(future.result())
            except (FrontmatterError, OSError, UnicodeDecodeError) as exc:
                _record(futures[future], exc)
    return report
