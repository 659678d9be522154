"""
Service layer for product-related business logic.

This package contains service modules that handle business logic used by
templates, API views and management commands.
"""
