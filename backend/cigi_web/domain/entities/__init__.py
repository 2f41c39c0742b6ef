from .records import (
    Record,
    AchievementEvent,
    Testimonial,
    CommunityActivity,
    MoreAboutItem,
    ProcessStep,
    new_record_id,
)
from .media import Media, Dimensions
from .pagination import PaginationData
from .global_variable import GlobalVariable, VariableType, VariableCategory
from .content import (
    News,
    BusinessUnit,
    BusinessUnitService,
    CommunityClub,
    CommunityClubActivity,
    ContactMessage,
    MessageStatus,
)
from .page import Page, NavigationOptions, FileUpload, PRESERVE
from .toast import Toast, ToastType

__all__ = [
    "Record",
    "AchievementEvent",
    "Testimonial",
    "CommunityActivity",
    "MoreAboutItem",
    "ProcessStep",
    "new_record_id",
    "Media",
    "Dimensions",
    "PaginationData",
    "GlobalVariable",
    "VariableType",
    "VariableCategory",
    "News",
    "BusinessUnit",
    "BusinessUnitService",
    "CommunityClub",
    "CommunityClubActivity",
    "ContactMessage",
    "MessageStatus",
    "Page",
    "NavigationOptions",
    "FileUpload",
    "PRESERVE",
    "Toast",
    "ToastType",
]
