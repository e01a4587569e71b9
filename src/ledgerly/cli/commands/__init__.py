"""CLI commands for ledgerly."""
