from pydantic import BaseModel


class HealthRead(BaseModel):
    status: str
    version: str
    uptime: int
    mongo: str
    hostname: str
    environment: str
