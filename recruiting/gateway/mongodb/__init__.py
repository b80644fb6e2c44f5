from recruiting.gateway.mongodb.consultant_gateway import MongoConsultantGateway
from recruiting.gateway.mongodb.user_gateway import MongoUserGateway

__all__ = ["MongoConsultantGateway", "MongoUserGateway"]
