from .navigator import Navigator
from .route_resolver import RouteResolver
from .toast_host import ToastHost
from .browser import ShareCapability, ClipboardCapability
from .confirmer import Confirmer

__all__ = [
    "Navigator",
    "RouteResolver",
    "ToastHost",
    "ShareCapability",
    "ClipboardCapability",
    "Confirmer",
]
