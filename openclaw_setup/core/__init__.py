"""Core configuration generation for the OpenClaw setup tool."""
