"""Interfaces layer: wire contracts and their HTTP error mapping."""
