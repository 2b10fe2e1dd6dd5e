"""Scheduling commands."""
