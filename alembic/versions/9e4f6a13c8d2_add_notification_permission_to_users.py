"""add notification_permission to users

Revision ID: 9e4f6a13c8d2
Revises: 5b1d0c7e2a41
Create Date: 2026-10-14 21:37:52.118730

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect

# revision identifiers, used by Alembic.
revision: str = '9e4f6a13c8d2'
down_revision: Union[str, None] = '5b1d0c7e2a41'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def column_exists(table_name: str, column_name: str) -> bool:
    conn = op.get_bind()
    inspector = inspect(conn)
    columns = [col["name"] for col in inspector.get_columns(table_name)]
    return column_name in columns


def upgrade() -> None:
    # create_all may already have added it on a dev database
    if not column_exists('users', 'notification_permission'):
        op.add_column(
            'users',
            sa.Column('notification_permission', sa.String(), nullable=False, server_default='default')
        )


def downgrade() -> None:
    if column_exists('users', 'notification_permission'):
        with op.batch_alter_table('users') as batch_op:
            batch_op.drop_column('notification_permission')
