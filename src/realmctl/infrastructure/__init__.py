"""Infrastructure layer — local key-value storage and the workspace.

Infrastructure may import from domain and config, never from services
or commands.
"""
