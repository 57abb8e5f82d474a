from alembic import op
import sqlalchemy as sa

revision = '20261019090000'
down_revision = None

def upgrade():
    op.create_table(
        'products',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(240), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('price', sa.Numeric(12, 2), nullable=False),
        sa.Column('stock_quantity', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('sku_code', sa.String(64), nullable=False, unique=True),
    )

def downgrade():
    op.drop_table('products')
