"""
Gateway module - persistence backends behind one contract.

The backend is picked once per process from `settings.datastore`.
"""
from recruiting.core.config import get_settings
from recruiting.gateway.base import ConsultantGateway, UserGateway


def get_consultant_gateway() -> ConsultantGateway:
    """Consultant gateway for the configured store."""
    if get_settings().datastore == "mongodb":
        from recruiting.gateway.mongodb import MongoConsultantGateway
        return MongoConsultantGateway()
    from recruiting.gateway.relational import RelationalConsultantGateway
    return RelationalConsultantGateway()


def get_user_gateway() -> UserGateway:
    """User gateway for the configured store."""
    if get_settings().datastore == "mongodb":
        from recruiting.gateway.mongodb import MongoUserGateway
        return MongoUserGateway()
    from recruiting.gateway.relational import RelationalUserGateway
    return RelationalUserGateway()


__all__ = [
    "ConsultantGateway",
    "UserGateway",
    "get_consultant_gateway",
    "get_user_gateway",
]
