"""Domain layer — date resolution, formal-hall rules, and menu URLs.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
