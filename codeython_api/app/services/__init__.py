"""
Service layer.

Each service encapsulates the business logic for one domain and runs
every operation inside a single ``unit_of_work``.  API handlers call
services and translate their exceptions into HTTP responses.
"""
