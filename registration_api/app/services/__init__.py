"""
Service layer abstraction.

Services sit between the HTTP handlers and the store gateway so that
handlers only deal with request and response shapes.
"""
