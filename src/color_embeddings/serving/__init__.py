"""
Serving — FastAPI application exposing color search over HTTP.
"""
