"""
Infrastructure Layer - PostgreSQL Persistence and Operations

This layer contains:
- Database: connection pooling and the query adapter
- Repositories: PostgreSQL implementations of the repository interfaces
- Monitoring: structured logging
- Config: settings loading and DSN building
"""
