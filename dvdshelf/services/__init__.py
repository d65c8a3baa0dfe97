"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases.
They coordinate between entities, ports, and external systems.

This layer contains:
- collection_query: in-memory filter engine and collection aggregates
- dvd_service: validated, owner-scoped DVD CRUD
- metadata_lookup: title / scanned code lookup against a movie database
- user_service: user upsert on authentication
"""
