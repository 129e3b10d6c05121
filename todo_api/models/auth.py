from sqlalchemy import Column, Integer, String
from todo_api.database import Base

class Auth(Base):
    __tablename__ = "auths"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, index=True)
    password1 = Column(String, nullable=False)
    password2 = Column(String, nullable=False)
