"""Lambda handlers for Hello Lambda."""
