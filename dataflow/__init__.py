"""
Dataflow Layer

I/O layer for the pipeline editor. Contains:
- api: FastAPI service exposing the edit controller to renderers
"""
