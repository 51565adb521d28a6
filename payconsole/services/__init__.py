"""Services package."""
from payconsole.services import authorization_service

__all__ = ["authorization_service"]
