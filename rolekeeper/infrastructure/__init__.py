"""Infrastructure adapters for the ACL ports."""
