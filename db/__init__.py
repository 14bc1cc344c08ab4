"""
db/ - Database Layer
====================
Handles PostgreSQL connections, schema initialization, and the error kinds
raised by the data-access layer.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
