"""
Runtime Module

Process entry point for the editor service (python -m engine.runtime.main).
"""
