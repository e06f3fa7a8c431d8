"""create books, categories and categorizations

Revision ID: 5e1c0a7d2b94
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5e1c0a7d2b94'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _drop_existing() -> None:
    # Tables are recreated from scratch; anything already there is discarded.
    existing = set(sa.inspect(op.get_bind()).get_table_names())
    for name in ('categorizations', 'categories', 'books'):
        if name in existing:
            op.drop_table(name)


def upgrade() -> None:
    """Upgrade schema."""
    _drop_existing()

    op.create_table(
        'books',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'categories',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'categorizations',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('book_id', sa.Integer(), nullable=True),
        sa.Column('category_id', sa.Integer(), nullable=True),
        sa.Column('primary', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['book_id'], ['books.id']),
        sa.ForeignKeyConstraint(['category_id'], ['categories.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_categorizations_book_id', 'categorizations', ['book_id'])
    op.create_index('ix_categorizations_category_id', 'categorizations', ['category_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_categorizations_category_id', 'categorizations')
    op.drop_index('ix_categorizations_book_id', 'categorizations')
    op.drop_table('categorizations')
    op.drop_table('categories')
    op.drop_table('books')
