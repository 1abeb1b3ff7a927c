"""
Service layer abstraction.

Each service owns one JSON collection and encapsulates the business
rules for its entity kind.  API handlers only translate HTTP to
service calls, so the storage backend can change without touching
them.
"""
