"""
Services for dualcargo.

Execution-related services live in the execution/ subpackage; logging.py
holds the diagnostic logger implementations.
"""
