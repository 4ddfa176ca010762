"""Storage adapters: in-memory fake and Redis."""
