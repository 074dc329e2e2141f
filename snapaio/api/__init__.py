"""snapaio API: one package per domain, each command a ``cmd_*`` function returning a StageResult."""
