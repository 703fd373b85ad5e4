"""
Pydantic models for the command arsenal.

This module defines all data models used throughout the application, including:
- The config document that names the active data file
- The command store document (groups and their commands)
- Transient search results
- API request/response models

JSON keys on disk are camelCase (``dataPath``, ``groupKey``); the models expose
snake_case attributes and declare the camelCase names as aliases. Documents are
always written with ``by_alias=True``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List

from pydantic import BaseModel, Field, ConfigDict, field_validator

# Timestamp used for commands stored without a creation time.
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Config Document
# ---------------------------------------------------------------------------


class Config(BaseModel):
    """
    Installation-wide configuration, stored at ``<config-dir>/config.json``.

    Created on first run and overwritten whenever the user picks another data
    file. The core never deletes it.
    """

    model_config = ConfigDict(populate_by_name=True)

    data_path: str = Field(
        alias="dataPath",
        description="Absolute path to the active command store file.",
    )


# ---------------------------------------------------------------------------
# Command Store Document
# ---------------------------------------------------------------------------


class Command(BaseModel):
    """
    One stored shell snippet.

    ``id`` is unique within the owning group only and is assigned by the
    service as ``max(existing ids) + 1``. ``created`` is stamped once and never
    changed by an update.
    """

    id: int = Field(ge=0, description="Group-scoped identifier.")
    cmd: str = Field(default="", description="The shell command text.")
    description: str = Field(default="", description="What the command does.")
    output: str = Field(default="", description="Sample output.")
    note: str = Field(default="", description="Free-form note.")
    tags: List[str] = Field(default_factory=list, description="Search tags.")
    created: datetime = Field(
        default=ZERO_TIME,
        description="Creation timestamp (ISO-8601).",
    )

    @field_validator("tags", mode="before")
    @classmethod
    def _null_tags_as_empty(cls, value):
        # Older files store a missing tag list as null.
        return [] if value is None else value


class Group(BaseModel):
    """
    A named collection of related commands.

    A group has no identity of its own; it is addressed by its key in
    ``CommandsFile.groups``. The order of ``commands`` is meaningful.
    """

    name: str = ""
    icon: str = ""
    description: str = ""
    commands: List[Command] = Field(default_factory=list)

    @field_validator("commands", mode="before")
    @classmethod
    def _null_commands_as_empty(cls, value):
        return [] if value is None else value


class CommandsFile(BaseModel):
    """Root of the command store document."""

    groups: Dict[str, Group] = Field(
        default_factory=dict,
        description="Groups keyed by caller-chosen slug.",
    )

    @field_validator("groups", mode="before")
    @classmethod
    def _null_groups_as_empty(cls, value):
        return {} if value is None else value


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------


class SearchResult(BaseModel):
    """A single search hit. Produced on demand, never persisted."""

    model_config = ConfigDict(populate_by_name=True)

    group_key: str = Field(alias="groupKey")
    group_name: str = Field(alias="groupName")
    command: Command


# ---------------------------------------------------------------------------
# API Request/Response Models
# ---------------------------------------------------------------------------


class DataPathRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    data_path: str = Field(
        alias="dataPath",
        min_length=1,
        description="Absolute path of the command store file to use.",
    )


class GroupRequest(BaseModel):
    """Body for creating or replacing a group."""

    name: str = Field(description="Display name of the group.")
    icon: str = Field(default="", description="Icon identifier shown by the UI.")
    description: str = Field(default="", description="Short description of the group.")


class CommandRequest(BaseModel):
    """
    Body for adding or updating a command.

    ``id`` and ``created`` are never accepted from callers.
    """

    cmd: str = Field(description="The shell command text.")
    description: str = Field(default="")
    output: str = Field(default="")
    note: str = Field(default="")
    tags: List[str] = Field(default_factory=list)


class HasConfigResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    has_config: bool = Field(alias="hasConfig")
