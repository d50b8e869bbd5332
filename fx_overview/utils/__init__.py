"""Shared helpers for :mod:`fx_overview`."""
