"""Gateways for the side effects of library retrieval.

Each gateway ships an ABC, a production implementation, and an in-memory fake:
- process: launching subprocesses and capturing their output
- archive: unpacking downloaded archives
- workspace: choosing a destination directory per request
- feedback: progress lines for the user
"""
