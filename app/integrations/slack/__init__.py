"""Slack Integration Package.

This package contains the Slack Web API integration modules. Contains:

- client: Shared WebClient instance built from settings.
- users: Workspace member listing with presence.
- invites: Workspace invitations by email.
"""
