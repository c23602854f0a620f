"""
Service layer abstraction.

Each service encapsulates the queries for a domain behind a small set
of methods so that API handlers never build SQL themselves.
"""
