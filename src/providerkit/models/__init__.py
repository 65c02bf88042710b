"""Shared models for providerkit."""
