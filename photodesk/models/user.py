"""ORM models for user accounts and teams."""

from sqlalchemy import Column, ForeignKey, Integer, String

from photodesk.models.base import Base


class User(Base):
    """
    Photographer, assistant or admin account.

    role: 'admin', 'photographer' or 'assistant'
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(64), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default="photographer")
    team_id = Column(Integer, ForeignKey("teams.id", ondelete="SET NULL"), nullable=True)
    iban = Column(String(64), nullable=True)
    bank_name = Column(String(255), nullable=True)
    bank_address = Column(String(1024), nullable=True)
    bic_code = Column(String(32), nullable=True)


class Team(Base):
    """Team created by owner_id; users join through users.team_id."""

    __tablename__ = "teams"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    owner_id = Column(
        Integer,
        ForeignKey("users.id", use_alter=True, name="fk_teams_owner_id_users"),
        nullable=False,
        index=True,
    )
