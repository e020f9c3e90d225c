"""
Timestamp resolution shared by every normalizer.
"""


def resolve_triggered_timestamp(
    delivery_timestamp: int | str | None, fallback: int | str | None
) -> str | None:
    """
    Pick the webhook-triggered timestamp for an event.

    The delivery-level timestamp always wins when present; otherwise the
    fallback (entry time, or the timestamp embedded in the body) is used.
    """
    if delivery_timestamp is not None:
        return str(delivery_timestamp)
    if fallback is not None:
        return str(fallback)
    return None
