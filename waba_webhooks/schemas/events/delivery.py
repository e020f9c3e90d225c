"""
Raw webhook delivery handed to the event handlers by the ingress layer.
"""

from pydantic import BaseModel, ConfigDict, Field


class WebhookDelivery(BaseModel):
    """One webhook call: the raw body plus the provider timestamp, if any."""

    model_config = ConfigDict(frozen=True)

    payload: str | bytes | None = Field(
        None, description="JSON body as received; bytes are decoded by the handler"
    )
    timestamp: int | None = Field(
        None, description="Delivery-level provider timestamp (epoch seconds)"
    )

    def __str__(self) -> str:
        size = len(self.payload) if self.payload is not None else None
        return f"WebhookDelivery(timestamp={self.timestamp}, payload_size={size})"
