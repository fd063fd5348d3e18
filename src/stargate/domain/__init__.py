"""Domain layer — duty titles, date rules, and the duty timeline planner.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
