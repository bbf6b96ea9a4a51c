"""
Application layer.

The application layer orchestrates domain objects and defines the boundaries
of the system. It contains the use cases available to UI collaborators and
the protocols of the external services they depend on.
"""
