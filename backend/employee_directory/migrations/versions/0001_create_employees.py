"""create employees table

Revision ID: 0001_create_employees
Revises:
Create Date: 2025-11-15 20:26:51.626731

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001_create_employees"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Databases from before revisions were tracked already have the table.
    if sa.inspect(op.get_bind()).has_table("employees"):
        return

    op.create_table(
        "employees",
        sa.Column("id", sa.String(7), primary_key=True, nullable=False),
        sa.Column("name", sa.String(50)),
        sa.Column("role", sa.String(40)),
        sa.Column("gender", sa.String(10)),
        sa.Column("dob", sa.Date()),
        sa.Column("location", sa.String(40)),
        sa.Column("email", sa.String(50)),
        sa.Column("phone", sa.String(10)),
        sa.Column("join_date", sa.Date()),
        sa.Column("experience", sa.Integer()),
        sa.Column("skills", sa.Text()),
        sa.Column("achievement", sa.Text()),
        sa.Column("profile_image", sa.String(255), nullable=True),
    )


def downgrade() -> None:
    op.drop_table("employees")
