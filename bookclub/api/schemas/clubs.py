from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class CreateClubRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(default="", max_length=2000)


class UpdateClubRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=2000)


class ClubResponse(BaseModel):
    id: int
    name: str
    description: str
    created_at: datetime
    updated_at: datetime


class CreateMembershipRequest(BaseModel):
    user_id: int
    club_id: int
    permission_level: int


class MembershipResponse(BaseModel):
    id: int
    user_id: int
    club_id: int
    permission_level: int
    created_at: datetime
