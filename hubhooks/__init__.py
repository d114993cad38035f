"""Manage HubSpot app webhook settings and event subscriptions."""

__version__ = "0.1.0"
__all__ = ["models", "service"]