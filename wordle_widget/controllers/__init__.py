"""
Controllers Package

HTTP blueprints for the JSON API and the server-rendered board.
"""
