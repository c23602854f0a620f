"""
Pattern endpoints.

These routes expose a CRUD API over stored drum patterns:

* ``GET /`` lists every pattern.
* ``POST /`` creates a pattern; every field is required.
* ``GET /{pattern_id}`` returns one pattern.
* ``PATCH /{pattern_id}`` overwrites some of its fields.
* ``DELETE /{pattern_id}`` removes it.

Routes on ``/{pattern_id}`` first look the pattern up and answer 404
when it does not exist.  Every pattern leaving the API goes through
``serialize_pattern``, which coerces ids and escapes user supplied text.
"""

import html
import json
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from tr_bot_api.app.schemas.pattern import PatternCreate, PatternRead, PatternUpdate
from tr_bot_api.app.services.pattern_service import PatternService

router = APIRouter()


def _sanitize(value: Any) -> str:
    """Escape markup so stored text cannot inject scripts into clients."""
    return html.escape(str(value), quote=False)


def serialize_pattern(pattern: Dict[str, Any]) -> PatternRead:
    """Format a stored row for clients.

    ``user_id`` is escaped as text first and converted to a number
    afterwards.
    """
    return PatternRead(
        id=int(pattern["id"]),
        name=_sanitize(pattern["name"]),
        user_id=int(_sanitize(pattern["user_id"])),
        kick_steps=pattern["kick_steps"],
        snare_steps=pattern["snare_steps"],
        hh1_steps=pattern["hh1_steps"],
        hh2_steps=pattern["hh2_steps"],
        clap_steps=pattern["clap_steps"],
        perc_steps=pattern["perc_steps"],
    )


def get_pattern_service(request: Request) -> PatternService:
    """Build a service bound to the database handle of the running app."""
    return PatternService(request.app.state.db)


async def get_existing_pattern(
    pattern_id: int,
    service: PatternService = Depends(get_pattern_service),
) -> Dict[str, Any]:
    """Load the pattern named in the path or answer 404."""
    pattern = await service.get_pattern(pattern_id)
    if pattern is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pattern doesn't exist")
    return pattern


async def read_pattern_update(request: Request) -> PatternUpdate:
    """Parse the request body into a ``PatternUpdate``.

    An empty body or a JSON ``null`` counts as an empty update.  Decoding
    and schema errors are raised as ``RequestValidationError`` so they get
    the same 400 response as errors FastAPI finds itself.
    """
    raw = await request.body()
    if not raw:
        return PatternUpdate()
    try:
        body = json.loads(raw)
    except ValueError as exc:
        raise RequestValidationError(
            [{"type": "json_invalid", "loc": ("body",), "msg": f"JSON decode error: {exc}"}]
        )
    try:
        return PatternUpdate.model_validate(body if body is not None else {})
    except ValidationError as exc:
        raise RequestValidationError(
            [{**error, "loc": ("body", *error["loc"])} for error in exc.errors()]
        )


@router.get("", response_model=List[PatternRead])
@router.get("/", response_model=List[PatternRead], include_in_schema=False)
async def list_patterns(
    service: PatternService = Depends(get_pattern_service),
) -> List[PatternRead]:
    """Return all patterns."""
    patterns = await service.list_patterns()
    return [serialize_pattern(pattern) for pattern in patterns]


@router.post("", response_model=PatternRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=PatternRead, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_pattern(
    pattern_in: Optional[PatternCreate] = None,
    service: PatternService = Depends(get_pattern_service),
) -> PatternRead:
    """Create a new pattern.

    Fields are checked in declaration order and the first missing one
    is reported; the rest are not looked at.
    """
    new_pattern = (pattern_in or PatternCreate()).model_dump()
    for key, value in new_pattern.items():
        if value is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Missing '{key}' in request body",
            )
    pattern = await service.create_pattern(new_pattern)
    return serialize_pattern(pattern)


@router.get("/{pattern_id}", response_model=PatternRead)
async def get_pattern(
    pattern: Dict[str, Any] = Depends(get_existing_pattern),
) -> PatternRead:
    """Retrieve a single pattern by ID."""
    return serialize_pattern(pattern)


@router.delete(
    "/{pattern_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(get_existing_pattern)],
)
async def delete_pattern(
    pattern_id: int,
    service: PatternService = Depends(get_pattern_service),
) -> Response:
    """Delete a pattern."""
    await service.delete_pattern(pattern_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch(
    "/{pattern_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(get_existing_pattern)],
)
async def update_pattern(
    pattern_id: int,
    request: Request,
    service: PatternService = Depends(get_pattern_service),
) -> Response:
    """Update some fields of a pattern.

    The body is read only after the pattern was found, so an unknown id
    answers 404 whatever the body holds.

    Falsy values (``0``, ``""``, ``[]``) do not count as content: a body
    made only of them is rejected.  Next to a truthy value they are
    still written.
    """
    pattern_in = await read_pattern_update(request)
    pattern_to_update = pattern_in.model_dump()
    number_of_values = len([value for value in pattern_to_update.values() if value])
    if number_of_values == 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Request body must contain updated content",
        )
    fields = {key: value for key, value in pattern_to_update.items() if value is not None}
    await service.update_pattern(pattern_id, fields)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
