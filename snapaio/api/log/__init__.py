"""Log module - the operator log written during runs."""
