"""Core scaffolding logic (no CLI concerns)."""
