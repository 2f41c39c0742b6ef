"""Edit form for a community-club activity."""

from typing import Any

from cigi_web.application.forms import wire_format as wf
from cigi_web.application.forms.form_page import FormPage
from cigi_web.domain.entities import CommunityClubActivity


class CommunityClubActivityForm(FormPage):
    store_route = "admin.community-club-activities.store"
    update_route = "admin.community-club-activities.update"
    use_wire_format = True
    schema = {
        "featured": wf.BOOLEAN,
        "image": wf.FILE,
        "benefits": wf.STRING_LIST,
    }

    def __init__(self, navigator, routes, **kwargs: Any):
        super().__init__(navigator, routes, **kwargs)
        self.benefits = self.string_list("benefits")

    @classmethod
    def default_data(cls) -> dict[str, Any]:
        return {
            "community_club_id": "",
            "title": "",
            "description": "",
            "short_description": "",
            "max_participants": "",
            "duration": "",
            "status": "active",
            "featured": False,
            "image": None,
            "benefits": [""],
            "requirements": "",
            "schedule": "",
            "location": "",
            "contact_info": "",
        }

    @classmethod
    def for_activity(
        cls, activity: CommunityClubActivity, navigator, routes, **kwargs: Any
    ) -> "CommunityClubActivityForm":
        initial = {
            "community_club_id": str(activity.community_club_id),
            "title": activity.title,
            "description": activity.description,
            "short_description": activity.short_description or "",
            "max_participants": "" if activity.max_participants is None else str(activity.max_participants),
            "duration": activity.duration,
            "status": activity.status,
            "featured": activity.featured,
            "benefits": list(activity.benefits) or [""],
            "requirements": activity.requirements or "",
            "schedule": activity.schedule or "",
            "location": activity.location or "",
            "contact_info": activity.contact_info or "",
        }
        return cls(navigator, routes, initial=initial, record_id=activity.id, **kwargs)
