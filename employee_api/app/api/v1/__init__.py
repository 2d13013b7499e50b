"""
Version 1 of the API.

Routes are mounted at the application root, so ``/employees`` is
served without a version prefix.
"""
