from pydantic import AliasChoices, BaseModel, Field


class BookingCreate(BaseModel):
    date: str = Field(min_length=1)
    time: str = Field(min_length=1)
    service: str = Field(min_length=1)


class BookingResponse(BaseModel):
    id: int
    date: str
    time: str
    service: str
    user_id: int = Field(
        validation_alias=AliasChoices("userId", "user_id"),
        serialization_alias="userId",
    )

    class Config:
        from_attributes = True


class BookingCreatedResponse(BaseModel):
    message: str
    booking: BookingResponse
