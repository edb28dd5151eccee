"""Checkout payload framework with Protocol, platform enum and Registry."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sitecabins.domain.value_objects import OrderLine


logger = logging.getLogger(__name__)

CURRENCY = "AUD"


class CheckoutPlatform(str, Enum):
    """Target shapes for the checkout payload."""

    GENERIC = "generic"
    SHOPIFY = "shopify"
    STRIPE = "stripe"

    @classmethod
    def from_identifier(cls, identifier: str | CheckoutPlatform) -> CheckoutPlatform:
        """Resolve a platform name, defaulting to GENERIC.

        Unrecognized names fall back to the generic shape on purpose
        instead of failing. Whether to reject them outright is still an
        open decision.
        """
        try:
            return cls(identifier)
        except ValueError:
            logger.debug(f"Unknown checkout platform '{identifier}', using generic")
            return cls.GENERIC


@runtime_checkable
class PayloadRenderer(Protocol):
    """Protocol for checkout payload renderers.

    Attributes:
        platform: The platform this renderer produces payloads for.
    """

    platform: ClassVar[CheckoutPlatform]

    def render(self, lines: list[OrderLine]) -> dict[str, Any]:
        """Render consolidated order lines into the platform's payload."""
        ...


class PayloadRendererRegistry:
    """Registry of payload renderers keyed by platform.

    Renderers register themselves with the
    ``@PayloadRendererRegistry.register`` decorator when their module is
    imported.

    Example:
        @PayloadRendererRegistry.register(CheckoutPlatform.GENERIC)
        class GenericPayloadRenderer:
            platform = CheckoutPlatform.GENERIC
            ...
    """

    _renderers: ClassVar[dict[CheckoutPlatform, type[PayloadRenderer]]] = {}

    @classmethod
    def register(cls, platform: CheckoutPlatform) -> Any:
        """Decorator to register a renderer class for ``platform``."""

        def decorator(renderer_class: type[PayloadRenderer]) -> type[PayloadRenderer]:
            if platform in cls._renderers:
                logger.warning(
                    f"Overwriting existing payload renderer for '{platform.value}'"
                )
            cls._renderers[platform] = renderer_class
            logger.debug(
                f"Registered payload renderer '{platform.value}': "
                f"{renderer_class.__name__}"
            )
            return renderer_class

        return decorator

    @classmethod
    def get(cls, platform: CheckoutPlatform) -> type[PayloadRenderer]:
        """Get the renderer class for a platform.

        Raises:
            KeyError: If no renderer is registered for the platform.
        """
        if platform not in cls._renderers:
            available = ", ".join(cls.available_platforms())
            raise KeyError(
                f"No payload renderer registered for '{platform.value}'. "
                f"Available platforms: {available or 'none'}"
            )
        return cls._renderers[platform]

    @classmethod
    def available_platforms(cls) -> list[str]:
        """Sorted names of all registered platforms."""
        return sorted(platform.value for platform in cls._renderers)
