from sqlalchemy import Column, DateTime, Identity, Integer, String
from gigapi.core.database import Base


class Gig(Base):
    """
    Gig model representing a concert or event entry.

    Column names use the PascalCase layout of the Gigs table;
    Python attributes are snake_case.
    """
    __tablename__ = "Gigs"
    # AUTOINCREMENT on SQLite so ids of deleted rows are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    gig_id = Column("GigId", Integer, Identity(start=1, increment=1), primary_key=True)
    name = Column("Name", String, nullable=False)
    # Naive UTC; GigBase converts offset-aware input before it gets here
    gig_date = Column("GigDate", DateTime, nullable=False)
    music_genre = Column("MusicGenre", String, nullable=True)

    def __repr__(self):
        return f"<Gig(gig_id={self.gig_id}, name='{self.name}', gig_date={self.gig_date})>"
