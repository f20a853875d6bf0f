"""initial_schema

Revision ID: 4c1e8a9b2d07
Revises:
Create Date: 2026-10-19 10:12:44.218093

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4c1e8a9b2d07'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

user_type = sa.Enum("ADMIN", "USER", name="usertype")
gender = sa.Enum("MALE", "FEMALE", "OTHER", name="gender")
activity_level = sa.Enum("SEDENTARY", "LIGHT", "MODERATE", "VERY_ACTIVE", "EXTREME", name="activitylevel")
weight_source = sa.Enum("MANUAL", "PROGRESS", "PROFILE_UPDATE", name="weightsource")
diet_type = sa.Enum("WEIGHT_LOSS", "MUSCLE_GAIN", "MAINTENANCE", "CUSTOM", name="diettype")
meal_type = sa.Enum(
    "BREAKFAST", "LUNCH", "DINNER", "MORNING_SNACK", "AFTERNOON_SNACK", "EVENING_SNACK",
    name="mealtype",
)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(50), nullable=False, unique=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("type", user_type, nullable=False),
        sa.Column("height", sa.Float()),
        sa.Column("weight", sa.Float()),
        sa.Column("target_weight", sa.Float()),
        sa.Column("country", sa.String(100)),
        sa.Column("city", sa.String(100)),
        sa.Column("phone", sa.String(50)),
        sa.Column("occupation", sa.String(100)),
        sa.Column("date_of_birth", sa.DateTime(timezone=True)),
        sa.Column("gender", gender),
        sa.Column("activity_level", activity_level),
        sa.Column("first_login", sa.Boolean(), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "sessions",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_sessions_user_id", "sessions", ["user_id"])

    op.create_table(
        "foods",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("brand", sa.String(100)),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column("serving_size", sa.Float(), nullable=False),
        sa.Column("serving_unit", sa.String(20), nullable=False),
        sa.Column("calories", sa.Float(), nullable=False),
        sa.Column("protein", sa.Float(), nullable=False),
        sa.Column("fat", sa.Float(), nullable=False),
        sa.Column("carbs", sa.Float(), nullable=False),
        sa.Column("picture", sa.String(1000)),
        sa.Column("barcode", sa.String(1000)),
        sa.Column("verified", sa.Boolean()),
        sa.Column("created_by", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_foods_name", "foods", ["name"])
    op.create_index("ix_foods_category", "foods", ["category"])
    op.create_index("ix_foods_barcode", "foods", ["barcode"], unique=True)

    op.create_table(
        "exercises",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(300), nullable=False),
        sa.Column("notes", sa.String(400)),
        sa.Column("alternative", sa.String(100)),
        sa.Column("video", sa.String(1000)),
        *_timestamps(),
    )
    op.create_index("ix_exercises_name", "exercises", ["name"])

    op.create_table(
        "weight_history",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("weight", sa.Float(), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("source", weight_source, nullable=False),
        sa.Column("notes", sa.String(500)),
    )
    op.create_index("weight_history_user_date_idx", "weight_history", ["user_id", "date"])

    op.create_table(
        "diets",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text()),
        sa.Column("type", diet_type, nullable=False),
        sa.Column("calorie_target", sa.Integer(), nullable=False),
        sa.Column("protein_target", sa.Float()),
        sa.Column("carb_target", sa.Float()),
        sa.Column("fat_target", sa.Float()),
        sa.Column("start_date", sa.DateTime(timezone=True)),
        sa.Column("end_date", sa.DateTime(timezone=True)),
        sa.Column("active", sa.Boolean()),
        *_timestamps(),
    )
    op.create_index("ix_diets_user_id", "diets", ["user_id"])
    op.create_index("diets_active_idx", "diets", ["user_id", "active"])

    op.create_table(
        "meals",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("diet_id", sa.Integer(), sa.ForeignKey("diets.id"), nullable=False),
        sa.Column("type", meal_type, nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("target_calories", sa.Integer()),
        sa.Column("time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("duration", sa.Integer()),
        sa.Column("notes", sa.Text()),
        sa.Column("completed", sa.Boolean()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_meals_diet_id", "meals", ["diet_id"])
    op.create_index("ix_meals_time", "meals", ["time"])

    op.create_table(
        "meal_foods",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("meal_id", sa.Integer(), sa.ForeignKey("meals.id"), nullable=False),
        sa.Column("food_id", sa.Integer(), sa.ForeignKey("foods.id"), nullable=False),
        sa.Column("quantity", sa.Float(), nullable=False),
        sa.Column("unit", sa.String(20), nullable=False),
        sa.Column("notes", sa.Text()),
        sa.Column("order", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_meal_foods_meal_id", "meal_foods", ["meal_id"])
    op.create_index("meal_foods_order_idx", "meal_foods", ["meal_id", "order"])

    op.create_table(
        "workouts",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True)),
        sa.Column("duration", sa.Integer(), nullable=False),
        sa.Column("calories_burned", sa.Float()),
        sa.Column("notes", sa.Text()),
        sa.Column("rating", sa.Integer()),
        sa.Column("completed", sa.Boolean()),
        *_timestamps(),
    )
    op.create_index("ix_workouts_user_id", "workouts", ["user_id"])
    op.create_index("ix_workouts_date", "workouts", ["date"])

    op.create_table(
        "progress",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("weight", sa.Float()),
        sa.Column("body_fat", sa.Float()),
        sa.Column("muscle_weight", sa.Float()),
        sa.Column("waist_circumference", sa.Float()),
        sa.Column("chest_circumference", sa.Float()),
        sa.Column("arm_circumference", sa.Float()),
        sa.Column("thigh_circumference", sa.Float()),
        sa.Column("notes", sa.Text()),
        sa.Column("picture", sa.String(1000)),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )


def downgrade() -> None:
    """Downgrade schema."""
    for table in (
        "progress", "workouts", "meal_foods", "meals", "diets",
        "weight_history", "exercises", "foods", "sessions", "users",
    ):
        op.drop_table(table)

    bind = op.get_bind()
    for enum in (meal_type, diet_type, weight_source, activity_level, gender, user_type):
        enum.drop(bind, checkfirst=True)
