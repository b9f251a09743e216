"""Adapters – concrete integrations for the client's ports."""
