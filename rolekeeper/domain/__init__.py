"""Domain layer: ACL model, ports and services."""
