"""
Service layer.

Each service wraps one repository in a transaction per call.  The
API handlers only talk to services, never to repositories.
"""
