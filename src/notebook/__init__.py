"""Notebook backend application: accounts, profiles and the HTTP API."""
