from pydantic import BaseModel


class LinkCreateRequest(BaseModel):
    # Length and syntax are checked by validate_long_url, so failures share the 400 envelope
    url: str


class LinkResponse(BaseModel):
    long_url: str
    short_token: str
    short_url: str
