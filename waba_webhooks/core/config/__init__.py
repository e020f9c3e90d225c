"""Configuration module for the WABA webhook service."""

from .settings import PipelineSettings, Settings, settings

__all__ = ["PipelineSettings", "Settings", "settings"]
