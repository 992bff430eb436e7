"""
API package containing the HTTP routes.

``router.py`` exposes a top‑level ``router`` that includes the
routers of every module in ``endpoints``.
"""
