"""
handlers/ - Presentation Layer
================================
Console menu handlers. They read the user's answers, delegate to the
ProjectService, and print the result.
No business logic lives here.
"""
