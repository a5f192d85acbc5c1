"""add employee profile image reference

Revision ID: 0002_add_profile_image
Revises: 0001_create_employees
Create Date: 2025-11-20 09:12:03.000000
"""

from alembic import op
import sqlalchemy as sa


revision = "0002_add_profile_image"
down_revision = "0001_create_employees"
branch_labels = None
depends_on = None


def upgrade() -> None:
    columns = {col["name"] for col in sa.inspect(op.get_bind()).get_columns("employees")}
    if "profile_image" not in columns:
        op.add_column("employees", sa.Column("profile_image", sa.String(255), nullable=True))


def downgrade() -> None:
    with op.batch_alter_table("employees") as batch_op:
        batch_op.drop_column("profile_image")
