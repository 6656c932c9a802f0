"""Infrastructure layer: database, repositories, security, graph client.

This layer depends on stdlib and third-party libs (SQLAlchemy, passlib,
PyJWT, requests). Repositories map rows to domain entities; nothing here
imports from services, commands, or output.
"""
