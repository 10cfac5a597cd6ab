"""
Controllers Package

HTTP blueprints served next to the Socket.IO endpoint.
"""
