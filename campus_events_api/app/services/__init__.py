"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Services read
and mutate the shared tables from ``core.store`` and raise
``CampusEventsError`` subclasses on failure, leaving HTTP concerns to
the endpoint layer.
"""
