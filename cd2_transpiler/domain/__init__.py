"""Domain layer for the CD2 Transpiler.

This layer contains the schema transformation engine and its entities.
It is independent of file access, the CLI and logging.
"""
