"""Shared constants for the onboarding wizard."""
