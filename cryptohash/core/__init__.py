"""
Core infrastructure for cryptohash: exceptions, interfaces, configuration
models and settings, and the service container used by the CLI.
"""
