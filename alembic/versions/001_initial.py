"""Initial tables: users, training_scenarios, scenario_obstructions, scenario_attempts.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "training_scenarios",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("difficulty", sa.String(32), nullable=False),
        sa.Column("category", sa.String(64), nullable=True),
        sa.Column("estimated_time_minutes", sa.Integer(), nullable=True),
        sa.Column("learning_objectives", sa.Text(), nullable=True),
        sa.Column("site_width", sa.Float(), nullable=True),
        sa.Column("site_length", sa.Float(), nullable=True),
        sa.Column("load_weight", sa.Float(), nullable=True),
        sa.Column("load_width", sa.Float(), nullable=True),
        sa.Column("load_length", sa.Float(), nullable=True),
        sa.Column("load_height", sa.Float(), nullable=True),
        sa.Column("load_fragile", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_training_scenarios_difficulty"), "training_scenarios", ["difficulty"], unique=False)
    op.create_index(op.f("ix_training_scenarios_category"), "training_scenarios", ["category"], unique=False)

    op.create_table(
        "scenario_obstructions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("scenario_id", sa.Integer(), nullable=False),
        sa.Column("type", sa.String(32), nullable=False),
        sa.Column("x", sa.Float(), nullable=False),
        sa.Column("y", sa.Float(), nullable=False),
        sa.Column("width", sa.Float(), nullable=False),
        sa.Column("height", sa.Float(), nullable=False),
        sa.Column("hazard_level", sa.String(16), nullable=False),
        sa.ForeignKeyConstraint(["scenario_id"], ["training_scenarios.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_scenario_obstructions_scenario_id"), "scenario_obstructions", ["scenario_id"], unique=False
    )

    op.create_table(
        "scenario_attempts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("scenario_id", sa.Integer(), nullable=False),
        sa.Column("selected_crane_id", sa.String(64), nullable=True),
        sa.Column("crane_x", sa.Float(), nullable=True),
        sa.Column("crane_y", sa.Float(), nullable=True),
        sa.Column("capacity_checked", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("radius_verified", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("ground_bearing_checked", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("obstacles_reviewed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("outriggers_checked", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("score", sa.Integer(), nullable=True),
        sa.Column("passed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("total_time_seconds", sa.Integer(), nullable=True),
        sa.Column("completed_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["scenario_id"], ["training_scenarios.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_scenario_attempts_user_id"), "scenario_attempts", ["user_id"], unique=False)
    op.create_index(op.f("ix_scenario_attempts_scenario_id"), "scenario_attempts", ["scenario_id"], unique=False)
    op.create_index(op.f("ix_scenario_attempts_completed_at"), "scenario_attempts", ["completed_at"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_scenario_attempts_completed_at"), table_name="scenario_attempts")
    op.drop_index(op.f("ix_scenario_attempts_scenario_id"), table_name="scenario_attempts")
    op.drop_index(op.f("ix_scenario_attempts_user_id"), table_name="scenario_attempts")
    op.drop_table("scenario_attempts")
    op.drop_index(op.f("ix_scenario_obstructions_scenario_id"), table_name="scenario_obstructions")
    op.drop_table("scenario_obstructions")
    op.drop_index(op.f("ix_training_scenarios_category"), table_name="training_scenarios")
    op.drop_index(op.f("ix_training_scenarios_difficulty"), table_name="training_scenarios")
    op.drop_table("training_scenarios")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
