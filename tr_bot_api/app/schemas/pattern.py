"""
Pydantic schemas for drum patterns.

A pattern belongs to a user, has a display name and six step
sequences, one per voice of the drum machine.  Each sequence is a
list of trigger values (usually ``0`` or ``1``).

Request schemas declare every field as optional.  Presence
is checked by the route handlers, which report the first missing field
by name instead of returning a list of schema errors.  Field order
matters, it is the order in which missing fields are reported.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


STEP_FIELDS = (
    "kick_steps",
    "snare_steps",
    "hh1_steps",
    "hh2_steps",
    "clap_steps",
    "perc_steps",
)


class PatternCreate(BaseModel):
    """Schema for creating a new pattern."""

    user_id: Optional[int] = Field(None, description="Owner of the pattern")
    name: Optional[str] = Field(None, description="Display name")
    kick_steps: Optional[List[int]] = None
    snare_steps: Optional[List[int]] = None
    hh1_steps: Optional[List[int]] = None
    hh2_steps: Optional[List[int]] = None
    clap_steps: Optional[List[int]] = None
    perc_steps: Optional[List[int]] = None


class PatternUpdate(BaseModel):
    """Schema for updating an existing pattern.

    ``user_id`` is not updatable.
    """

    name: Optional[str] = None
    kick_steps: Optional[List[int]] = None
    snare_steps: Optional[List[int]] = None
    hh1_steps: Optional[List[int]] = None
    hh2_steps: Optional[List[int]] = None
    clap_steps: Optional[List[int]] = None
    perc_steps: Optional[List[int]] = None


class PatternRead(BaseModel):
    """Schema for a pattern returned to clients."""

    id: int
    user_id: int
    name: str
    kick_steps: List[int]
    snare_steps: List[int]
    hh1_steps: List[int]
    hh2_steps: List[int]
    clap_steps: List[int]
    perc_steps: List[int]
