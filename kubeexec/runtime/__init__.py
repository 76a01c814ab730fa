"""Runtime configuration: settings resolution and logging."""
