"""Account management core: registration, profile edits and deletion."""
