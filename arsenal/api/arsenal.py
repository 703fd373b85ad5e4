"""
HTTP bindings for the arsenal call surface.

One endpoint per service operation, so a browser or desktop front-end can
drive the data layer. Error responses are produced by the exception handler
registered in ``arsenal.main``; missing groups and ids are not errors here
either and still answer ``{"success": true}``.
"""

from __future__ import annotations

from typing import Dict, List
import logging

from fastapi import APIRouter, Depends, Query

from arsenal.core.dependencies import get_arsenal_service
from arsenal.domain.models import (
    CommandRequest,
    CommandsFile,
    Config,
    DataPathRequest,
    Group,
    GroupRequest,
    HasConfigResponse,
    SearchResult,
)
from arsenal.services.arsenal_service import ArsenalService

logger = logging.getLogger(__name__)
router = APIRouter()

SUCCESS = {"success": True}

# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------


@router.get("/config/exists")
async def has_config(service: ArsenalService = Depends(get_arsenal_service)) -> HasConfigResponse:
    return HasConfigResponse(has_config=service.has_config())


@router.get("/config")
async def get_config(service: ArsenalService = Depends(get_arsenal_service)) -> Config:
    return service.get_config()


@router.put("/config/data-path")
async def set_data_path(
    request: DataPathRequest,
    service: ArsenalService = Depends(get_arsenal_service),
) -> dict:
    service.set_data_path(request.data_path)
    return SUCCESS


@router.post("/config/initialize")
async def initialize_default(service: ArsenalService = Depends(get_arsenal_service)) -> dict:
    """
    First-run bootstrap. Safe to call on every start: an existing config is
    adopted and an existing data file is left untouched.
    """
    path = service.initialize_default()
    return {"dataPath": str(path)}


# ---------------------------------------------------------------------------
# Groups and commands
# ---------------------------------------------------------------------------


@router.get("/commands")
async def get_commands(service: ArsenalService = Depends(get_arsenal_service)) -> CommandsFile:
    return service.get_commands()


@router.get("/groups")
async def get_groups(service: ArsenalService = Depends(get_arsenal_service)) -> Dict[str, Group]:
    return service.get_groups()


@router.put("/groups/{group_key}")
async def add_group(
    group_key: str,
    request: GroupRequest,
    service: ArsenalService = Depends(get_arsenal_service),
) -> dict:
    """Create or replace a group. Replacing discards the group's commands."""
    service.add_group(group_key, request.name, request.icon, request.description)
    return SUCCESS


@router.delete("/groups/{group_key}")
async def delete_group(group_key: str, service: ArsenalService = Depends(get_arsenal_service)) -> dict:
    service.delete_group(group_key)
    return SUCCESS


@router.post("/groups/{group_key}/commands")
async def add_command(
    group_key: str,
    request: CommandRequest,
    service: ArsenalService = Depends(get_arsenal_service),
) -> dict:
    service.add_command(
        group_key,
        request.cmd,
        request.description,
        request.output,
        request.note,
        request.tags,
    )
    return SUCCESS


@router.put("/groups/{group_key}/commands/{command_id}")
async def update_command(
    group_key: str,
    command_id: int,
    request: CommandRequest,
    service: ArsenalService = Depends(get_arsenal_service),
) -> dict:
    service.update_command(
        group_key,
        command_id,
        request.cmd,
        request.description,
        request.output,
        request.note,
        request.tags,
    )
    return SUCCESS


@router.delete("/groups/{group_key}/commands/{command_id}")
async def delete_command(
    group_key: str,
    command_id: int,
    service: ArsenalService = Depends(get_arsenal_service),
) -> dict:
    service.delete_command(group_key, command_id)
    return SUCCESS


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------


@router.get("/search")
async def search(
    q: str = Query(default="", description="Case-insensitive substring matched against command, description and tags."),
    service: ArsenalService = Depends(get_arsenal_service),
) -> List[SearchResult]:
    return service.search(q)
