"""
Source Code Root Module

Meu Agito insights service.

Layer Structure:
- Domain: Forecasting, suggestion rules and campaign composition
- Application: Use cases, DTOs and configuration carriers
- Infrastructure: Implementations of domain ports (random source)
- Presentation: FastAPI controllers consumed by the partner dashboard
- Shared: Cross-cutting concerns (logging, constants)
- Main: Composition root, application entry point and configuration
"""
