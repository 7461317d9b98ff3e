"""
Dashcam Backend Application: root package.

This package contains the FastAPI app entry point (main.py), API routes,
the device session and command-dispatch core (domain models, repositories,
services), and the dependency injection wiring that ties them together.
"""
