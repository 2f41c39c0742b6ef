"""Public site chrome: header navigation, contact call-to-action, info cards."""

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from cigi_web.application.interfaces import RouteResolver
from cigi_web.domain.entities import BusinessUnit, CommunityClub, MoreAboutItem

BUSINESS_UNIT_LIMIT = 6
COMMUNITY_CLUB_LIMIT = 8
SCROLL_THRESHOLD = 20

SECTION_PREFIXES = ("/unit-bisnis", "/komunitas", "/berita")


@dataclass
class NavLink:
    label: str
    href: str
    active: bool = False
    description: str | None = None
    image: str | None = None


@dataclass
class ClubGroup:
    type: str
    clubs: list[NavLink] = field(default_factory=list)


@dataclass
class HeaderView:
    home: NavLink
    business_units_index: NavLink
    business_units: list[NavLink]
    community_clubs_index: NavLink
    club_groups: list[ClubGroup]
    news: NavLink
    mobile_menu_open: bool
    scrolled: bool


def _coerce(items: Sequence[Any], entity: type) -> list[Any]:
    return [item if isinstance(item, entity) else entity.from_mapping(item) for item in items]


class PublicHeader:
    """Top navigation of the public site.

    Dropdown contents are capped (business units and community clubs); clubs
    are grouped by type in the order each type first appears.
    """

    def __init__(
        self,
        routes: RouteResolver,
        *,
        business_units: Sequence[BusinessUnit | Mapping[str, Any]] = (),
        community_clubs: Sequence[CommunityClub | Mapping[str, Any]] = (),
        current_url: str = "/",
        business_unit_limit: int = BUSINESS_UNIT_LIMIT,
        community_club_limit: int = COMMUNITY_CLUB_LIMIT,
    ):
        self._routes = routes
        self.business_units: list[BusinessUnit] = _coerce(business_units, BusinessUnit)[:business_unit_limit]
        self.community_clubs: list[CommunityClub] = _coerce(community_clubs, CommunityClub)[:community_club_limit]
        self.current_url = current_url
        self.mobile_menu_open = False
        self.scrolled = False

    @property
    def clubs_by_type(self) -> dict[str, list[CommunityClub]]:
        groups: dict[str, list[CommunityClub]] = {}
        for club in self.community_clubs:
            groups.setdefault(club.type, []).append(club)
        return groups

    def is_active(self, path: str) -> bool:
        return self.current_url.startswith(path)

    @property
    def home_active(self) -> bool:
        return self.is_active("/") and not any(self.is_active(p) for p in SECTION_PREFIXES)

    def toggle_mobile_menu(self) -> bool:
        self.mobile_menu_open = not self.mobile_menu_open
        return self.mobile_menu_open

    def close_mobile_menu(self) -> None:
        """Following any mobile link closes the menu."""
        self.mobile_menu_open = False

    def on_scroll(self, scroll_y: float) -> bool:
        self.scrolled = scroll_y > SCROLL_THRESHOLD
        return self.scrolled

    def render(self) -> HeaderView:
        r = self._routes
        return HeaderView(
            home=NavLink("Beranda", r.resolve("home"), active=self.home_active),
            business_units_index=NavLink(
                "Semua Unit Bisnis",
                r.resolve("business-units.index"),
                active=self.is_active("/unit-bisnis"),
                description="Lihat seluruh unit bisnis kami",
            ),
            business_units=[
                NavLink(
                    unit.name,
                    r.resolve("business-units.show", unit.slug),
                    description=unit.description or None,
                    image=unit.image,
                )
                for unit in self.business_units
            ],
            community_clubs_index=NavLink(
                "Semua Komunitas",
                r.resolve("community-clubs.index"),
                active=self.is_active("/komunitas"),
                description="Jelajahi komunitas kami",
            ),
            club_groups=[
                ClubGroup(
                    type=club_type,
                    clubs=[
                        NavLink(
                            club.name,
                            r.resolve("community-clubs.show", club.slug),
                            description=club.description or None,
                            image=club.image,
                        )
                        for club in clubs
                    ],
                )
                for club_type, clubs in self.clubs_by_type.items()
            ],
            news=NavLink("Berita", r.resolve("news.index"), active=self.is_active("/berita")),
            mobile_menu_open=self.mobile_menu_open,
            scrolled=self.scrolled,
        )


# ── Contact call-to-action ───────────────────────────────────────────


@dataclass(frozen=True)
class ContactLink:
    kind: str
    label: str
    href: str
    external: bool = False


def whatsapp_link(number: str) -> str:
    return f"https://wa.me/{re.sub(r'[^0-9]', '', number)}"


class ContactCta:
    """Contact buttons built from public global variables; absent values hide their button."""

    def __init__(self, global_variables: Mapping[str, Any]):
        self._vars = global_variables

    def _value(self, key: str) -> str:
        return str(self._vars.get(key) or "").strip()

    @property
    def address(self) -> str | None:
        return self._value("contact_address") or None

    def links(self) -> list[ContactLink]:
        links: list[ContactLink] = []
        if whatsapp := self._value("contact_whatsapp"):
            links.append(ContactLink("whatsapp", "WhatsApp", whatsapp_link(whatsapp), external=True))
        if email := self._value("contact_email"):
            links.append(ContactLink("email", "Email", f"mailto:{email}"))
        if phone := self._value("contact_phone"):
            links.append(ContactLink("phone", phone, f"tel:{re.sub(r'[^0-9+]', '', phone)}"))
        return links


# ── "More about" cards ───────────────────────────────────────────────

_ICON_KEYWORDS = (
    ("misi", "target"),
    ("visi", "lightbulb"),
    ("nilai", "heart"),
    ("sejarah", "book-open"),
    ("program", "award"),
    ("target", "target"),
)
DEFAULT_ICON = "info"


def more_about_icon(title: str) -> str:
    """Icon name for a card, picked by the first keyword found in its title."""
    lowered = title.lower()
    for keyword, icon in _ICON_KEYWORDS:
        if keyword in lowered:
            return icon
    return DEFAULT_ICON


@dataclass(frozen=True)
class MoreAboutCard:
    title: str
    description: str
    icon: str


class MoreAboutCards:
    def __init__(self, items: Sequence[MoreAboutItem | Mapping[str, Any]]):
        self.items = list(items)

    def render(self) -> list[MoreAboutCard]:
        cards = []
        for item in self.items:
            title = item.get("title", "") if isinstance(item, Mapping) else item.title
            description = item.get("description", "") if isinstance(item, Mapping) else item.description
            if not title.strip():
                continue
            cards.append(MoreAboutCard(title=title, description=description, icon=more_about_icon(title)))
        return cards
