from wiki.extensions import db


class BaseModel(db.Model):
    __abstract__ = True

    id = db.Column("Id", db.Integer, primary_key=True, autoincrement=True)

    def __init__(self, **kwargs):
        """
        Dummy __init__ to satisfy static type checkers (Pylance, MyPy).
        SQLAlchemy ORM will populate fields dynamically.
        """
        super().__init__(**kwargs)
