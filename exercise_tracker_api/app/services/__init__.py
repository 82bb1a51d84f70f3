"""
Service layer abstraction.

Each service encapsulates the business rules for one entity and talks
to the shared ``Database`` handle it is constructed with.  API
handlers never issue SQL themselves.
"""
