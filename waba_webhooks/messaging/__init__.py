"""Outbound messaging for the WABA webhook service."""
