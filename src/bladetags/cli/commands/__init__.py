"""Top-level bladetags commands (auto-discovered)."""
