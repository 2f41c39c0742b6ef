"""Pydantic DTOs for the public navigation endpoints."""

from typing import Any

from pydantic import BaseModel, Field


class HeaderRequest(BaseModel):
    business_units: list[dict[str, Any]] = Field(default_factory=list)
    community_clubs: list[dict[str, Any]] = Field(default_factory=list)
    current_url: str = "/"
    scroll_y: float = 0
    mobile_menu_open: bool = False


class NavLinkResponse(BaseModel):
    label: str
    href: str
    active: bool = False
    description: str | None = None
    image: str | None = None

    model_config = {"from_attributes": True}


class ClubGroupResponse(BaseModel):
    type: str
    clubs: list[NavLinkResponse]

    model_config = {"from_attributes": True}


class HeaderResponse(BaseModel):
    home: NavLinkResponse
    business_units_index: NavLinkResponse
    business_units: list[NavLinkResponse]
    community_clubs_index: NavLinkResponse
    club_groups: list[ClubGroupResponse]
    news: NavLinkResponse
    mobile_menu_open: bool
    scrolled: bool

    model_config = {"from_attributes": True}


class RouteResponse(BaseModel):
    name: str
    url: str
