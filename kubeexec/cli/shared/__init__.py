"""Shared CLI helpers: console output, terminal probe and argv handling."""
