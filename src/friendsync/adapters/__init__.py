"""Adapters connecting the domain to Steam and the database."""
