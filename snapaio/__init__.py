"""snapaio - scheduled SnapRAID maintenance orchestrator."""
