"""Data helpers for Jira Cloud payloads."""

from .adf import text_to_adf

__all__ = ["text_to_adf"]
