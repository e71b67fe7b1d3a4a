"""A command-line todo manager with per-user tasks and categories."""
