"""Run module - one maintenance invocation from DIFF to report."""
