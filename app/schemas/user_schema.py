from pydantic import BaseModel


class UserOut(BaseModel):
    name: str
    phone: str
    address: str

    model_config = {
        "from_attributes": True
    }
