"""SQLAlchemy models."""

from airisk.models.assessment import Assessment
from airisk.models.base import Base, BaseModel
from airisk.models.enums import (
    AutonomyLevel,
    DataSensitivity,
    ImpactScope,
    Language,
    MeasureTag,
    ProjectType,
    RiskTier,
    TransparencyLevel,
    UseCase,
)

__all__ = [
    "Base",
    "BaseModel",
    "AutonomyLevel",
    "DataSensitivity",
    "ImpactScope",
    "TransparencyLevel",
    "ProjectType",
    "UseCase",
    "RiskTier",
    "MeasureTag",
    "Language",
    "Assessment",
]
