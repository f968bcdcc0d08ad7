"""AWS service bindings."""
