"""Domain-specific exceptions: framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class RouteNotFoundError(Exception):
    """Raised when a named route is not part of the route table."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Route '{name}' is not defined")


class MissingRouteParameterError(Exception):
    """Raised when a route placeholder has no value."""

    def __init__(self, route_name: str, parameter: str):
        self.route_name = route_name
        self.parameter = parameter
        super().__init__(f"Route '{route_name}' requires parameter '{parameter}'")


class NavigationError(Exception):
    """Raised when the backend answers a page visit with an unexpected status."""

    def __init__(self, method: str, url: str, status_code: int, message: str):
        self.method = method
        self.url = url
        self.status_code = status_code
        self.message = message
        super().__init__(f"{method} {url} -> {status_code}: {message}")


class CapabilityUnavailableError(Exception):
    """Raised when a browser capability (share, clipboard) cannot be used."""

    def __init__(self, capability: str, reason: str = "not available"):
        self.capability = capability
        self.reason = reason
        super().__init__(f"{capability} {reason}")


class UnknownFieldError(Exception):
    """Raised when a record update names a field the record shape lacks."""

    def __init__(self, shape: str, field: str):
        self.shape = shape
        self.field = field
        super().__init__(f"Record shape '{shape}' has no field '{field}'")


class InvalidFieldValueError(Exception):
    """Raised when a field validator rejects a value."""

    def __init__(self, shape: str, field: str, message: str):
        self.shape = shape
        self.field = field
        self.message = message
        super().__init__(f"{shape}.{field}: {message}")


class WireFormatError(Exception):
    """Raised when a flat form field cannot be decoded back into state."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"Field '{field}': {message}")
