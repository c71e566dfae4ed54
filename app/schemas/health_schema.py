from pydantic import BaseModel


class HealthOut(BaseModel):
    status: str = "OK"
    message: str
    timestamp: str
    port: int
    environment: str
    version: str


class ApiTestData(BaseModel):
    server: str = "FastAPI"
    status: str = "Active"
    time: str


class ApiTestOut(BaseModel):
    success: bool = True
    message: str = "API is working correctly"
    data: ApiTestData
