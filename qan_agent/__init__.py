"""Query analytics agent configuration for MySQL-compatible servers."""
