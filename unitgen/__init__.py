"""unitgen - systemd service unit generation."""
