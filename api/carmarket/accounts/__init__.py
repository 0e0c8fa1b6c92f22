"""User accounts: create-account and login."""
