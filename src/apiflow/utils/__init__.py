"""Utility helpers for apiflow."""
