"""Control module - hands serialized units to a service manager."""
