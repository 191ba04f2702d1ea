"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases:
ranking catalog titles against a query, ordering episode listings,
and resolving titles through a catalog client.

Services depend on ports (interfaces) from core/, never on concrete
implementations from adapters/.
"""
