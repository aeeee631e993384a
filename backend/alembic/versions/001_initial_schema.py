"""Initial schema

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def audit_columns() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('created_by', sa.String(length=20), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_by', sa.String(length=20), nullable=True),
    ]


def upgrade() -> None:
    # Create customer table
    op.create_table(
        'customer',
        sa.Column('customer_id', sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=100), nullable=False),
        sa.Column('mobile_number', sa.String(length=20), nullable=False),
        *audit_columns(),
    )
    op.create_index('ix_customer_mobile_number', 'customer', ['mobile_number'], unique=True)

    # Create accounts table
    op.create_table(
        'accounts',
        sa.Column('account_number', sa.BigInteger(), primary_key=True, autoincrement=False, nullable=False),
        sa.Column('customer_id', sa.Integer(), nullable=False),
        sa.Column('account_type', sa.String(length=100), nullable=False),
        sa.Column('branch_address', sa.String(length=200), nullable=True),
        *audit_columns(),
        sa.ForeignKeyConstraint(['customer_id'], ['customer.customer_id'], ondelete='CASCADE'),
    )
    op.create_index('ix_accounts_customer_id', 'accounts', ['customer_id'])

    # Create cards table
    op.create_table(
        'cards',
        sa.Column('card_id', sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column('mobile_number', sa.String(length=15), nullable=False),
        sa.Column('card_number', sa.String(length=100), nullable=False),
        sa.Column('card_type', sa.String(length=100), nullable=False),
        sa.Column('total_limit', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('amount_used', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('available_amount', sa.Numeric(precision=15, scale=2), nullable=False),
        *audit_columns(),
    )
    op.create_index('ix_cards_mobile_number', 'cards', ['mobile_number'], unique=True)
    op.create_index('ix_cards_card_number', 'cards', ['card_number'], unique=True)

    # Create loans table
    op.create_table(
        'loans',
        sa.Column('loan_id', sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column('mobile_number', sa.String(length=15), nullable=False),
        sa.Column('loan_number', sa.String(length=100), nullable=False),
        sa.Column('loan_type', sa.String(length=100), nullable=False),
        sa.Column('total_loan', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('amount_paid', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('outstanding_amount', sa.Numeric(precision=15, scale=2), nullable=False),
        *audit_columns(),
    )
    op.create_index('ix_loans_mobile_number', 'loans', ['mobile_number'], unique=True)
    op.create_index('ix_loans_loan_number', 'loans', ['loan_number'], unique=True)


def downgrade() -> None:
    # Drop tables in reverse order (respecting foreign key constraints)
    op.drop_index('ix_loans_loan_number', table_name='loans')
    op.drop_index('ix_loans_mobile_number', table_name='loans')
    op.drop_table('loans')

    op.drop_index('ix_cards_card_number', table_name='cards')
    op.drop_index('ix_cards_mobile_number', table_name='cards')
    op.drop_table('cards')

    op.drop_index('ix_accounts_customer_id', table_name='accounts')
    op.drop_table('accounts')

    op.drop_index('ix_customer_mobile_number', table_name='customer')
    op.drop_table('customer')
