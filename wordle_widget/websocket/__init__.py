"""
WebSocket Package

Socket.IO event handlers for the browser board.
"""
