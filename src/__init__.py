"""
Source Code Root Module

This module serves as the root for the source code of the application.

Layer Structure:
- Domain: Period descriptions, measurements and the alignment engine
- Application: Use cases and DTOs
- Presentation: Controllers and routes for the REST API
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
"""
