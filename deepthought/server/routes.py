"""
HTTP API Routes for Deep Thought.

The game client posts every table event it receives to
/tables/{table_id}/events and forwards each action request to
/tables/{table_id}/action, sending back whatever action comes out.
"""

from typing import Any, Dict
import logging

from fastapi import APIRouter, HTTPException, Request

from deepthought.exceptions import DecisionError
from deepthought.server.schemas import (
    ActionRequest, ActionSchema, EventRequest, EventResultSchema,
    HealthSchema, TableStateSchema,
)
from deepthought.server.sessions import TableRegistry

logger = logging.getLogger(__name__)

router = APIRouter()


def get_registry(request: Request) -> TableRegistry:
    """Get the table registry of the running application."""
    return request.app.state.registry


@router.get("/health", response_model=HealthSchema)
async def health(request: Request) -> Dict[str, Any]:
    registry = get_registry(request)
    return {
        "status": "ok",
        "name": registry.config.name,
        "tables": len(registry),
        "table_sizes": list(registry.statistics.table_sizes),
    }


@router.post("/tables/{table_id}/events", response_model=EventResultSchema)
async def post_event(table_id: str, req: EventRequest, request: Request) -> Dict[str, Any]:
    """
    Apply one table event.

    The first event for an unknown table seats a new agent there.
    """
    agent = get_registry(request).get_or_create(table_id)
    try:
        agent.observe(req.event.to_event())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "table_id": table_id,
        "event": req.event.type,
        "raise_counter": agent.raise_counter,
    }


@router.post("/tables/{table_id}/action", response_model=ActionSchema)
async def post_action(table_id: str, req: ActionRequest, request: Request) -> ActionSchema:
    """
    Choose one of the offered actions.

    The returned action is one of possible_actions with its amount unchanged.
    """
    agent = get_registry(request).get(table_id)
    if agent is None:
        raise HTTPException(status_code=404, detail=f"Unknown table: {table_id}")

    try:
        action = agent.act(req.to_actions())
    except DecisionError as e:
        logger.error(f"Table {table_id}: {e}")
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return ActionSchema.from_action(action)


@router.get("/tables/{table_id}/state", response_model=TableStateSchema)
async def get_table_state(table_id: str, request: Request) -> Dict[str, Any]:
    agent = get_registry(request).get(table_id)
    if agent is None:
        raise HTTPException(status_code=404, detail=f"Unknown table: {table_id}")

    table = agent.state.table
    try:
        snapshot = agent.snapshot().to_dict()
    except ValueError:
        # Not enough known yet (cards or players) for a full snapshot
        snapshot = None

    return {
        "table_id": table_id,
        "hand_number": table.hand_number,
        "phase": table.phase.value,
        "raise_counter": agent.raise_counter,
        "done": table.done,
        "snapshot": snapshot,
    }


@router.delete("/tables/{table_id}")
async def leave_table(table_id: str, request: Request) -> Dict[str, Any]:
    if not get_registry(request).drop(table_id):
        raise HTTPException(status_code=404, detail=f"Unknown table: {table_id}")
    return {"success": True, "message": f"Left table {table_id}"}
