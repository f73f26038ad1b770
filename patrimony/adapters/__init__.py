"""Outer adapters: CLI and dashboard."""
