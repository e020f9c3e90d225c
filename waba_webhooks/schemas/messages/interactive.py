"""
Interactive replies and catalog orders.
"""

from typing import ClassVar, Literal

from pydantic import AliasChoices, Field

from waba_webhooks.schemas.core.base_model import WebhookModel
from waba_webhooks.schemas.core.types import MessageType
from waba_webhooks.schemas.messages.base import BaseInboundMessage


class ListReply(WebhookModel):
    id: str | None = None
    title: str | None = None
    description: str | None = None


class ButtonReply(WebhookModel):
    id: str | None = None
    title: str | None = None


class InteractivePayload(WebhookModel):
    """User's answer to an interactive list or reply-button message."""

    type: str | None = None
    list_reply: ListReply | None = None
    button_reply: ButtonReply | None = None


class InteractiveMessage(BaseInboundMessage):
    payload_keys: ClassVar[frozenset[str]] = frozenset({"interactive"})

    type: Literal[MessageType.INTERACTIVE]
    interactive: InteractivePayload | None = None


class OrderProduct(WebhookModel):
    product_retailer_id: str | None = None
    quantity: int | None = None
    item_price: float | None = None
    currency: str | None = None


class OrderPayload(WebhookModel):
    """Cart sent from a product catalog."""

    catalog_id: str | None = None
    text: str | None = None
    products: list[OrderProduct] | None = Field(
        None,
        validation_alias=AliasChoices("products", "productItems", "product_items"),
        serialization_alias="products",
    )


class OrderMessage(BaseInboundMessage):
    payload_keys: ClassVar[frozenset[str]] = frozenset({"order"})

    type: Literal[MessageType.ORDER]
    order: OrderPayload | None = None
