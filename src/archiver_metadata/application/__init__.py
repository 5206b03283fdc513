"""
Application Layer - Use Cases and Orchestration

This layer contains:
- Interfaces: Repository contracts and the error taxonomy
- Use cases: RPC-style entry points for registering, reading and removing archivers

Depends on domain layer, orchestrates business logic.
Defines interfaces that infrastructure layer must implement.
"""
