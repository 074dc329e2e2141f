"""Notify module - delivers run reports to the operator."""
