"""
API layer for the dashcam backend.

Exposes device endpoints under /api/v1 (auth, config, heartbeat, commands,
events, media) and unauthenticated reporting under /dashboard.
"""
