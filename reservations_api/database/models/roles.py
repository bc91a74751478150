"""Organization roles and membership grants."""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from reservations_api.api.core.constants import ID_LENGTH
from .base import Base, generate_id


class OrganizationRole(Base):
    __tablename__ = "organization_roles"

    id: Mapped[str] = mapped_column(String(ID_LENGTH), primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)


class OrganizationMembership(Base):
    __tablename__ = "organization_memberships"

    id: Mapped[str] = mapped_column(
        String(ID_LENGTH), primary_key=True, default=generate_id
    )
    organization_id: Mapped[str] = mapped_column(
        String(ID_LENGTH),
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(ID_LENGTH), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    # Role ids are plain strings ("admin", "member"); not enforced against organization_roles
    role_id: Mapped[str] = mapped_column(String(ID_LENGTH), nullable=False)

    organization = relationship("Organization", back_populates="memberships")
