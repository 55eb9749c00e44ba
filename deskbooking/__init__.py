"""Desk booking service."""
