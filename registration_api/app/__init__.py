"""
Application package initializer.

The application is split into ``core`` (settings, logging, errors and
the document store gateway), ``api`` (route handlers), ``services``
(glue between handlers and the store) and ``schemas`` (response
envelopes).  ``main`` assembles them into a FastAPI application.
"""
