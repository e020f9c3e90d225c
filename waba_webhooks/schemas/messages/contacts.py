"""
Shared contact cards.
"""

from typing import ClassVar, Literal

from pydantic import AliasChoices, Field

from waba_webhooks.schemas.core.base_model import WebhookModel
from waba_webhooks.schemas.core.types import MessageType
from waba_webhooks.schemas.messages.base import BaseInboundMessage


class ContactName(WebhookModel):
    formatted_name: str | None = None
    first_name: str | None = None
    last_name: str | None = None


class ContactPhone(WebhookModel):
    phone: str | None = None
    type: str | None = None
    wa_id: str | None = None


class ContactEmail(WebhookModel):
    email: str | None = None
    type: str | None = None


class ContactCard(WebhookModel):
    name: ContactName | None = None
    phones: list[ContactPhone] | None = None
    emails: list[ContactEmail] | None = None


class ContactsMessage(BaseInboundMessage):
    payload_keys: ClassVar[frozenset[str]] = frozenset({"contacts", "contact"})

    type: Literal[MessageType.CONTACTS]
    contacts: list[ContactCard] | None = Field(
        None,
        validation_alias=AliasChoices("contacts", "contact"),
        serialization_alias="contacts",
    )
