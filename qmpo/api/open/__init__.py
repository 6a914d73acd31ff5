"""Open module - show directory URIs in the platform file manager."""
