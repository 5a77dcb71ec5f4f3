"""Helper modules for the create-lcs CLI (console output, prompts, settings)."""
