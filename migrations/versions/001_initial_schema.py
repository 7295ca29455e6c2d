"""Initial schema with PostGIS extension and the runs table.

Revision ID: 001
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa
from geoalchemy2 import Geometry


revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Enable PostGIS extension
    op.execute("CREATE EXTENSION IF NOT EXISTS postgis")

    # ── runs ──────────────────────────────────────────────────────────
    op.create_table(
        "runs",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("day_of_week", sa.String(10), nullable=False),
        sa.Column("start_time", sa.Text, nullable=False),
        sa.Column("location_name", sa.Text, nullable=False),
        sa.Column(
            "meeting_point",
            Geometry("POINT", srid=4326, spatial_index=False),
            nullable=True,
        ),
        sa.Column("latitude", sa.Float, nullable=False),
        sa.Column("longitude", sa.Float, nullable=False),
        sa.Column("typical_distances", sa.Text, nullable=False),
        sa.Column("terrain", sa.String(10), nullable=False),
        sa.Column("pace_groups", sa.JSON, nullable=False),
        sa.Column("contact_name", sa.Text, nullable=True),
        sa.Column("contact_email", sa.Text, nullable=True),
        sa.Column("contact_phone", sa.Text, nullable=True),
        sa.Column("notes", sa.Text, nullable=True),
        sa.Column(
            "is_active", sa.Boolean, nullable=False, server_default=sa.true()
        ),
        sa.Column("edit_token", sa.String(64), unique=True, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
        ),
    )
    op.create_index(
        "idx_runs_meeting_point",
        "runs",
        ["meeting_point"],
        postgresql_using="gist",
    )
    op.create_index("idx_runs_active", "runs", ["is_active"])


def downgrade() -> None:
    op.drop_index("idx_runs_active", table_name="runs")
    op.drop_index("idx_runs_meeting_point", table_name="runs")
    op.drop_table("runs")
