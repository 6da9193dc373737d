from __future__ import annotations

import pathlib

from pydantic import BaseModel, ConfigDict, Field


class TaskRecord(BaseModel):
    """One article to convert; serialized with camelCase keys in tasks.json."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    file_path: pathlib.Path = Field(alias="filePath")
    file_name: str = Field(alias="fileName")
    src_dir: pathlib.Path = Field(alias="srcDir")
    out_dir: pathlib.Path = Field(alias="outDir")


class TaskError(BaseModel):
    file: str
    error: str


class PlanResult(BaseModel):
    tasks: list[TaskRecord] = []
    errors: list[TaskError] = []


class RunReport(BaseModel):
    converted: int = 0
    copied: int = 0
    errors: list[TaskError] = []

    @property
    def ok(self) -> bool:
        return not self.errors
