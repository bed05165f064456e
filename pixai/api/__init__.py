"""Entrypoint adapters.

Scope:
    Command-line argument handling and terminal output only. All job lifecycle
    work is delegated to `pixai.core.PixAIClient`.
"""
