from alembic import op
import sqlalchemy as sa

revision = "20261019091500"
down_revision = None

def upgrade():
    op.create_table(
        'orders',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('order_number', sa.String(length=36), nullable=False, unique=True),
        sa.Column('status', sa.Enum("PENDING", "CONFIRMED", "SHIPPED", "DELIVERED", "CANCELLED", name="orderstatus"), nullable=False, server_default='PENDING'),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_table(
        'order_line_items',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('order_id', sa.Integer(), sa.ForeignKey('orders.id', ondelete='CASCADE'), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('sku_code', sa.String(length=64), nullable=False),
        sa.Column('price', sa.Numeric(12, 2), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
    )

def downgrade():
    op.drop_table('order_line_items')
    op.drop_table('orders')
    sa.Enum(name="orderstatus").drop(op.get_bind(), checkfirst=True)
