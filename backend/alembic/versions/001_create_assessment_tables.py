"""Create assessment tables

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Create the assessments table."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    op.create_table(
        'assessments',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text('uuid_generate_v4()')),
        sa.Column('user_id', sa.String(255), nullable=False),
        sa.Column('user_email', sa.String(255), nullable=True),
        sa.Column('user_name', sa.String(255), nullable=True),
        sa.Column('project_type', sa.String(100), nullable=False),
        sa.Column('ai_tool', sa.String(100), nullable=False),
        sa.Column('ai_use_cases', postgresql.JSONB, nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column('data_types', postgresql.JSONB, nullable=False),
        sa.Column('autonomy', sa.String(50), nullable=False),
        sa.Column('impact', sa.String(50), nullable=False),
        sa.Column('transparency', sa.String(20), nullable=False),
        sa.Column('risk_score', sa.Integer, nullable=False),
        sa.Column('risk_level', sa.String(20), nullable=False),
        sa.Column('measures', postgresql.JSONB, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('NOW()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('NOW()'), nullable=False),
        sa.CheckConstraint('risk_score >= 0 AND risk_score <= 20', name='assessment_risk_score_range'),
        sa.CheckConstraint(
            "risk_level IN ('minimal', 'low', 'medium', 'high', 'critical')",
            name='assessment_risk_level_valid',
        ),
    )
    op.create_index('ix_assessments_user_id', 'assessments', ['user_id'])
    op.create_index('idx_assessments_user_created', 'assessments', ['user_id', 'created_at'])
    op.create_index('idx_assessments_risk_level', 'assessments', ['risk_level'])


def downgrade() -> None:
    """Drop the assessments table."""
    op.drop_index('idx_assessments_risk_level', table_name='assessments')
    op.drop_index('idx_assessments_user_created', table_name='assessments')
    op.drop_index('ix_assessments_user_id', table_name='assessments')
    op.drop_table('assessments')
