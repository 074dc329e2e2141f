"""Report module - subject and body of the run notification."""
