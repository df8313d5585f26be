"""Remedy Ticketer: host trouble tickets mapped onto BMC Remedy incidents."""

__version__ = "1.0.0"
