"""
models/ - Domain Models
=======================
Plain dataclasses, one per table. No database access lives here.
"""
