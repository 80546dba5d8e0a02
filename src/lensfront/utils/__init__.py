"""Utility helpers for lensfront."""
