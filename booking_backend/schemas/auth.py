from pydantic import AliasChoices, BaseModel, Field


class SignupRequest(BaseModel):
    account_name: str = Field(alias="accountName", min_length=1)
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class SignupResponse(BaseModel):
    message: str
    user_id: int = Field(
        validation_alias=AliasChoices("userId", "user_id"),
        serialization_alias="userId",
    )


class SigninRequest(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class SigninResponse(BaseModel):
    message: str
    token: str


class AccountNameResponse(BaseModel):
    account_name: str = Field(
        validation_alias=AliasChoices("accountName", "account_name"),
        serialization_alias="accountName",
    )
