"""
Storefront - ASGI entry point

Serve with any ASGI server, e.g. `uvicorn api.index:app`.
"""
from storefront.app import create_app

app = create_app()
