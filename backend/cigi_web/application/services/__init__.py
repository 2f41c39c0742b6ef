from .notifier import FlashToastBridge, Notifier, UNKNOWN_ERROR_MESSAGE

__all__ = [
    "FlashToastBridge",
    "Notifier",
    "UNKNOWN_ERROR_MESSAGE",
]
