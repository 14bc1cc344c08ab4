"""
services/ - Business Logic Layer
================================
Sits between the console handlers and the repositories.
"""
