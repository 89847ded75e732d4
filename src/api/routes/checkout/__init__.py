"""Rotas HTTP do checkout."""

from api.routes.checkout.router import router

__all__ = ["router"]
