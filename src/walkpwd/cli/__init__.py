"""CLI for walkpwd."""
