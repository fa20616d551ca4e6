"""
Editor API

HTTP surface for external renderers.
"""
