"""Config module - unitgen home directory and configuration file."""
