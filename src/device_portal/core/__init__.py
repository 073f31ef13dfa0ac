"""Core of the device portal client: config, domain, contracts and services."""
