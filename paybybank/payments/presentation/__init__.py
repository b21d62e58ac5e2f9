"""Presentation surface and error channel."""

from paybybank.payments.presentation.error_channel import ErrorChannel, ErrorHandler
from paybybank.payments.presentation.surface import PresentationSurface, SurfaceFactory

__all__ = [
    "ErrorChannel",
    "ErrorHandler",
    "PresentationSurface",
    "SurfaceFactory",
]
