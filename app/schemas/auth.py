from app.schemas import CamelModel

class AdminLogin(CamelModel):
    username: str = ""
    password: str = ""

class AdminToken(CamelModel):
    success: bool = True
    token: str
