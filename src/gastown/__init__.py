"""Gas Town: ephemeral coordination and work handoff for agent processes."""
