from cigi_web.domain.exceptions import EntityNotFoundError

from .form_page import FormPage
from .wire_format import FieldKind, WireField, from_wire_format, to_wire_format
from .business_unit_service import BusinessUnitServiceForm
from .community_club_activity import CommunityClubActivityForm
from .news import NewsForm, slugify, split_tags
from .global_variable import GlobalVariableForm, ValueInput, value_input, value_problem
from .media import MediaForm
from .contact import ContactForm

FORMS: dict[str, type[FormPage]] = {
    "business-unit-services": BusinessUnitServiceForm,
    "community-club-activities": CommunityClubActivityForm,
    "news": NewsForm,
    "global-variables": GlobalVariableForm,
    "media": MediaForm,
    "contact": ContactForm,
}


def get_form(name: str) -> type[FormPage]:
    try:
        return FORMS[name]
    except KeyError:
        raise EntityNotFoundError("Form", name) from None


__all__ = [
    "FormPage",
    "FieldKind",
    "WireField",
    "from_wire_format",
    "to_wire_format",
    "BusinessUnitServiceForm",
    "CommunityClubActivityForm",
    "NewsForm",
    "slugify",
    "split_tags",
    "GlobalVariableForm",
    "ValueInput",
    "value_input",
    "value_problem",
    "MediaForm",
    "ContactForm",
    "FORMS",
    "get_form",
]
