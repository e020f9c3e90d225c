"""
Delivery context management using contextvars for automatic propagation.

The context is set once per webhook delivery and is picked up by every
ContextLogger created while that delivery is being processed.
"""

from contextvars import ContextVar

_waba_context: ContextVar[str | None] = ContextVar(
    "waba_id", default=None
)  # From entry.id
_phone_context: ContextVar[str | None] = ContextVar(
    "phone_number_id", default=None
)  # From the messaging value


def set_delivery_context(
    waba_id: str | None = None,
    phone_number_id: str | None = None,
) -> None:
    """
    Set the delivery context for the current async context.

    Args:
        waba_id: WhatsApp Business Account identifier the delivery belongs to
        phone_number_id: Business phone number ID that received the messages
    """
    if waba_id is not None:
        _waba_context.set(waba_id)
    if phone_number_id is not None:
        _phone_context.set(phone_number_id)


def get_current_waba_context() -> str | None:
    """Get the current WABA ID from context variables."""
    return _waba_context.get()


def get_current_phone_context() -> str | None:
    """Get the current business phone number ID from context variables."""
    return _phone_context.get()


def clear_delivery_context() -> None:
    """
    Clear the delivery context.

    Context is isolated per asyncio task already, this is mostly for tests.
    """
    _waba_context.set(None)
    _phone_context.set(None)


def get_context_info() -> dict[str, str | None]:
    """Get current context information for debugging."""
    return {
        "waba_id": get_current_waba_context(),
        "phone_number_id": get_current_phone_context(),
    }
