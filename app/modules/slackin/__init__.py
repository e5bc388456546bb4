"""Slackin module - public invitation page for a Slack workspace.

Contains:
- models: form and counter models
- validation: localized invite form validation
- service: online users and invitation workflow
- badge: SVG status badge rendering
- pages: landing page rendering
"""
