"""Request payloads for every entity, grouped by domain."""
