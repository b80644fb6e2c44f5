from recruiting.gateway.relational.consultant_gateway import RelationalConsultantGateway
from recruiting.gateway.relational.user_gateway import RelationalUserGateway

__all__ = ["RelationalConsultantGateway", "RelationalUserGateway"]
