from pydantic import BaseModel


class LoginInput(BaseModel):
	# username or email
	login: str
	password: str


class Token(BaseModel):
	access_token: str
	token_type: str = "bearer"
