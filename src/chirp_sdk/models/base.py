from pydantic import BaseModel, ConfigDict


class ChirpModel(BaseModel):
    """Base for all response models. Fields the SDK does not know about are dropped."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)
