"""Mockwright command-line interface."""
