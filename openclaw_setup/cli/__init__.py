"""CLI for the OpenClaw setup tool."""
