"""
Home application.

Server-rendered pages reachable through the default
`{controller=home}/{action=index}/{id?}` route, plus the generic error page
used as the 500 handler outside development.
"""
