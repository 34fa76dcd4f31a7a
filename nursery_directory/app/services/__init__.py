"""
Service layer abstraction.

Each service encapsulates the read rules for one collection.  Handlers
call services and never touch the document store directly.
"""
