from wiki.extensions import db
from .base import BaseModel

# Sentinel id for a page that has not been saved yet
UNSAVED_PAGE_ID = -1


class Page(BaseModel):
    __tablename__ = "Pages"

    name = db.Column("Name", db.String(255), unique=True, nullable=False)
    content = db.Column("Content", db.Text)

    def __repr__(self):
        return f"<Page {self.id} {self.name!r}>"
