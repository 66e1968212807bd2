"""
Domain Layer - Domain-Driven Design (DDD)

This layer contains the business logic and domain models of the application,
independent of any persistence or transport concerns.

Components:
- farm/: Crop batch tracking with entities, value objects, and business rules
- shared/: Common domain logic shared across subdomains
"""
