#!/usr/bin/env python3
"""
Restructure a tree of Markdown articles into one folder per article.

- articles/**/<name>.md -> output/<slug or parent folder>/<name>.md
  frontmatter: title, publishDate, description, tags (+ legacy)
- Sibling files (images etc.) are copied next to the converted article.
- `_index.md` section pages are never converted.

Two drivers share the same planner/executor:
- `restructure`: plan and convert in one pass.
- `restructure-tasks`: write tasks.json for review, then `--run` it.

Relative --input/--output/--manifest values resolve against the repo root
(two levels above config.py). That only holds for in-repo or editable
installs; with a regular install the defaults land inside site-packages,
so pass absolute paths there.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import (
    INPUT_DIR_NAME,
    MANIFEST_NAME,
    OUTPUT_DIR_NAME,
    RunConfig,
    resolve_from_root,
)
from .errors import ManifestError
from .executor import execute_tasks
from .models import RunReport, TaskError
from .planner import plan_tasks, read_manifest, write_manifest


def build_parser(prog: str, manifest: bool) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog)
    parser.add_argument(
        "--input",
        default=INPUT_DIR_NAME,
        help=f"Articles folder, relative to the repo root unless absolute (default: {INPUT_DIR_NAME})",
    )
    parser.add_argument(
        "--output",
        default=OUTPUT_DIR_NAME,
        help=f"Output folder, relative to the repo root unless absolute (default: {OUTPUT_DIR_NAME})",
    )
    parser.add_argument(
        "--jobs",
        type=int,
        default=1,
        help="Convert this many articles at once (default: 1)",
    )
    if manifest:
        parser.add_argument(
            "--manifest",
            default=MANIFEST_NAME,
            help=f"Task manifest path (default: {MANIFEST_NAME})",
        )
        parser.add_argument(
            "--run",
            action="store_true",
            help="Execute the tasks in the manifest instead of planning them",
        )
    return parser


def _config_from_args(args: argparse.Namespace, legacy: bool) -> RunConfig:
    kwargs = {}
    if getattr(args, "manifest", None):
        kwargs["manifest_path"] = resolve_from_root(args.manifest)
    return RunConfig(
        input_dir=resolve_from_root(args.input),
        output_dir=resolve_from_root(args.output),
        legacy=legacy,
        jobs=max(1, args.jobs),
        **kwargs,
    )


def _check_input(config: RunConfig) -> bool:
    if not config.input_dir.is_dir():
        print(f"ERROR: input folder {config.input_dir} missing", file=sys.stderr)
        return False
    return True


def _summarize(report: RunReport, skipped: List[TaskError]) -> int:
    errors = skipped + report.errors
    print(
        f"\n✓ done: {report.converted} converted, {report.copied} assets copied, "
        f"{len(errors)} failed (_index.md skipped)"
    )
    for err in errors:
        print(f"! {err.file}: {err.error}", file=sys.stderr)
    return 1 if errors else 0


def run_direct(config: RunConfig) -> int:
    if not _check_input(config):
        return 1
    plan = plan_tasks(config)
    report = execute_tasks(plan.tasks, config)
    return _summarize(report, plan.errors)


def run_plan(config: RunConfig) -> int:
    if not _check_input(config):
        return 1
    plan = plan_tasks(config)
    write_manifest(plan.tasks, config.manifest_path)
    for err in plan.errors:
        print(f"! {err.file}: {err.error}", file=sys.stderr)
    print(f"- review {config.manifest_path}, then rerun with --run")
    return 1 if plan.errors else 0


def run_manifest(config: RunConfig) -> int:
    try:
        tasks = read_manifest(config.manifest_path)
    except ManifestError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    report = execute_tasks(tasks, config)
    return _summarize(report, [])


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser("restructure", manifest=False).parse_args(argv)
    sys.exit(run_direct(_config_from_args(args, legacy=False)))


def main_tasks(argv: Optional[List[str]] = None) -> None:
    args = build_parser("restructure-tasks", manifest=True).parse_args(argv)
    config = _config_from_args(args, legacy=True)
    sys.exit(run_manifest(config) if args.run else run_plan(config))


if __name__ == "__main__":
    main()
