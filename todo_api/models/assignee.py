from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from todo_api.database import Base

class Assignee(Base):
    __tablename__ = "assignees"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    color = Column(String, nullable=True)

    # nullify-on-delete is done explicitly by the service, never cascade
    todos = relationship("Todo", back_populates="assignee", passive_deletes=True)
