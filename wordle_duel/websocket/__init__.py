"""
WebSocket Package

Socket.IO bindings for the game services.
"""
