"""Billingo CLI application: configuration and command surface."""
