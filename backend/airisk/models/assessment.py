"""Assessment model for stored questionnaire results."""

from sqlalchemy import Column, Index, Integer, String
from sqlalchemy import Enum as SQLEnum

from airisk.models.base import BaseModel, JSONType
from airisk.models.enums import RiskTier


class Assessment(BaseModel):
    """Completed AI risk assessment owned by one user.

    Stores the questionnaire answers together with the score, tier and
    measures computed at submission time. Records are never updated; the
    owner may delete them.
    """

    __tablename__ = "assessments"

    # Azure AD object ID (or subject) of the submitting user
    user_id = Column(
        String(255),
        nullable=False,
        index=True,
    )
    user_email = Column(
        String(255),
        nullable=True,
    )
    user_name = Column(
        String(255),
        nullable=True,
    )
    project_type = Column(
        String(100),
        nullable=False,
    )
    ai_tool = Column(
        String(100),
        nullable=False,
    )
    ai_use_cases = Column(
        JSONType,
        nullable=False,
        default=list,
    )
    data_types = Column(
        JSONType,
        nullable=False,
    )
    autonomy = Column(
        String(50),
        nullable=False,
    )
    impact = Column(
        String(50),
        nullable=False,
    )
    transparency = Column(
        String(20),
        nullable=False,
    )
    risk_score = Column(
        Integer,
        nullable=False,
    )
    risk_level = Column(
        SQLEnum(
            RiskTier,
            name="risk_tier",
            native_enum=False,
            length=20,
            values_callable=lambda x: [e.value for e in x],
        ),
        nullable=False,
    )
    measures = Column(
        JSONType,
        nullable=False,
    )

    __table_args__ = (
        Index("idx_assessments_user_created", "user_id", "created_at"),
        Index("idx_assessments_risk_level", "risk_level"),
    )

    def __repr__(self) -> str:
        return f"<Assessment(id={self.id}, user_id={self.user_id}, risk_level={self.risk_level})>"
