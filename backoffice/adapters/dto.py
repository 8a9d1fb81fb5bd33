from pydantic import BaseModel, ConfigDict


class InventoryItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    quantity: int
