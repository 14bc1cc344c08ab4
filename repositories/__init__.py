"""
repositories/ - Data Access Layer
==================================
SQL for the project tables. Every public repository method runs in its own
connection and transaction, and returns domain model objects.
"""
