"""Create/edit form for a business-unit service."""

from typing import Any

from cigi_web.application.components.record_shapes import PROCESS_STEPS
from cigi_web.application.forms import wire_format as wf
from cigi_web.application.forms.form_page import FormPage
from cigi_web.domain.entities import BusinessUnitService, ProcessStep

STATUS_OPTIONS = ("active", "inactive")


class BusinessUnitServiceForm(FormPage):
    """Features and technologies are string lists; process steps are records."""

    store_route = "admin.business-unit-services.store"
    update_route = "admin.business-unit-services.update"
    use_wire_format = True
    schema = {
        "featured": wf.BOOLEAN,
        "image": wf.FILE,
        "features": wf.STRING_LIST,
        "technologies": wf.STRING_LIST,
        "process_steps": wf.records(PROCESS_STEPS),
    }

    def __init__(self, navigator, routes, **kwargs: Any):
        super().__init__(navigator, routes, **kwargs)
        self.features = self.string_list("features")
        self.technologies = self.string_list("technologies")
        self.process_steps = self.record_list("process_steps", PROCESS_STEPS)

    @classmethod
    def default_data(cls) -> dict[str, Any]:
        return {
            "business_unit_id": "",
            "title": "",
            "description": "",
            "short_description": "",
            "price": "",
            "duration": "",
            "status": "active",
            "featured": False,
            "image": None,
            "features": [""],
            "technologies": [""],
            "process_steps": [ProcessStep(order=1)],
        }

    @classmethod
    def for_service(cls, service: BusinessUnitService, navigator, routes, **kwargs: Any) -> "BusinessUnitServiceForm":
        initial = {
            "business_unit_id": str(service.business_unit_id),
            "title": service.title,
            "description": service.description,
            "short_description": service.short_description or "",
            "price": service.price or "",
            "duration": service.duration,
            "status": service.status,
            "featured": service.featured,
            "features": list(service.features) or [""],
            "technologies": list(service.technologies) or [""],
            "process_steps": list(service.process_steps) or [ProcessStep(order=1)],
        }
        return cls(navigator, routes, initial=initial, record_id=service.id, **kwargs)
