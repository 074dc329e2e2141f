"""Diff module - structured view of the comparison step output."""
