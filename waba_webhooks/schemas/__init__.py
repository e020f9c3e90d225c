"""
Schemas for the WABA webhook service.

- core: shared base model and enums
- messages: inbound message variants
- envelope: provider webhook envelope
- events: canonical events and the raw delivery
"""
