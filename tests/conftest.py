"""Shared fixtures: small article trees under tmp_path."""

from pathlib import Path

import pytest

from restructurer.config import RunConfig


@pytest.fixture
def articles(tmp_path: Path) -> Path:
    root = tmp_path / "articles"
    root.mkdir()
    return root


@pytest.fixture
def make_article(articles: Path):
    def _make(rel: str, text: str) -> Path:
        path = articles / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _make


@pytest.fixture
def config(tmp_path: Path, articles: Path) -> RunConfig:
    return RunConfig(
        input_dir=articles,
        output_dir=tmp_path / "out",
        manifest_path=tmp_path / "tasks.json",
    )
