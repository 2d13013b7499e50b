"""
API package containing versioned routes, shared dependencies and
response helpers.
"""
