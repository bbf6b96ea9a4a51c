"""Session state, identity-scoped persistence helpers and the orchestrator."""
