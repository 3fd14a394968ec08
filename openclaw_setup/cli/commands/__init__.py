"""CLI commands for the OpenClaw setup tool."""
