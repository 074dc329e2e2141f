"""Policy module - decides whether sync and scrub may run."""
