"""
Service layer.

Each service encapsulates the business logic for one resource on top
of the generic pipeline in ``resource_service``.  API handlers only
translate HTTP to service calls; services raise the exceptions from
``core.exceptions``.
"""
