"""Counter module - small integers that persist between runs."""
