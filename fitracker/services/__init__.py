"""Fitracker services."""
