"""Helpers package - pure functions shared by services."""
