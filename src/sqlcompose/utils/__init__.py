"""Utility helpers for sqlcompose."""
