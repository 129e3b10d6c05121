from sqlalchemy import Column, Integer, String, ForeignKey
from todo_api.database import Base

class Todo(Base):
    __tablename__ = "todos"
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    content = Column(String, nullable=False, default="")
    # existence of the owning account is left to the store
    creator = Column(Integer, ForeignKey("auths.id"), nullable=False, index=True)
