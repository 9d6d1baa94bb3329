"""Create school reference tables

Revision ID: 001
Revises: None
Create Date: 2025-01-10 00:00:00.000000+00:00

What:  Creates the reference tables (classes, users, academic_years,
       payment_methods, fee_types) and the records that point at them
       (students, fee_structures, fee_payments, payment_details).
How:   Case-insensitive uniqueness uses functional unique indexes on lower(name).

Rollback: downgrade() drops every table, dependents first (destructive — all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.DateTime(timezone=True),
        server_default=sa.text("CURRENT_TIMESTAMP"),
        nullable=False,
    )


def upgrade() -> None:
    # ── classes ───────────────────────────────────────────────────────────
    op.create_table(
        "classes",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False,
                  comment="Display name, unique per level (case-insensitive)"),
        sa.Column("level", sa.Integer(), nullable=False,
                  comment="Grade level; listings sort ascending on it"),
        sa.Column("capacity", sa.Integer(), nullable=False, server_default=sa.text("40")),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    # Closes the check-then-insert race between concurrent creates
    op.create_index(
        "uq_classes_name_level",
        "classes",
        [sa.text("lower(name)"), "level"],
        unique=True,
    )
    op.create_index("idx_classes_level", "classes", ["level"])

    # ── users ─────────────────────────────────────────────────────────────
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column(
            "role",
            sa.Enum("SUPER_ADMIN", "ADMIN", "STAFF", name="user_role",
                    native_enum=False, length=20),
            nullable=False,
        ),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )

    # ── academic_years ────────────────────────────────────────────────────
    op.create_table(
        "academic_years",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("year", sa.String(20), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("year"),
    )

    # ── payment_methods ───────────────────────────────────────────────────
    op.create_table(
        "payment_methods",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "uq_payment_methods_name",
        "payment_methods",
        [sa.text("lower(name)")],
        unique=True,
    )

    # ── fee_types ─────────────────────────────────────────────────────────
    op.create_table(
        "fee_types",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_mandatory", sa.Boolean(), nullable=False),
        sa.Column("is_recurring", sa.Boolean(), nullable=False),
        sa.Column(
            "frequency",
            sa.Enum("ONCE", "TERM", "YEAR", "MONTH", name="fee_frequency",
                    native_enum=False, length=10),
            nullable=False,
        ),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "uq_fee_types_name",
        "fee_types",
        [sa.text("lower(name)")],
        unique=True,
    )


    # ── students ──────────────────────────────────────────────────────────
    op.create_table(
        "students",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("admission_number", sa.String(50), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("middle_name", sa.String(100), nullable=True),
        sa.Column("date_of_birth", sa.Date(), nullable=True),
        sa.Column("gender", sa.String(20), nullable=True),
        sa.Column("class_id", sa.Uuid(), nullable=False),
        sa.Column("academic_year_id", sa.Uuid(), nullable=False),
        sa.Column("parent_name", sa.String(200), nullable=True),
        sa.Column("parent_phone", sa.String(50), nullable=True),
        sa.Column("parent_email", sa.String(255), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column(
            "status",
            sa.Enum("ACTIVE", "GRADUATED", "TRANSFERRED", "SUSPENDED",
                    name="student_status", native_enum=False, length=20),
            nullable=False,
            server_default=sa.text("'ACTIVE'"),
        ),
        sa.Column("graduation_date", sa.Date(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("admission_number"),
        sa.ForeignKeyConstraint(["class_id"], ["classes.id"]),
        sa.ForeignKeyConstraint(["academic_year_id"], ["academic_years.id"]),
    )
    op.create_index("idx_students_created_at", "students", ["created_at"])
    op.create_index("idx_students_class_id", "students", ["class_id"])

    # ── fee_structures ────────────────────────────────────────────────────
    op.create_table(
        "fee_structures",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("academic_year_id", sa.Uuid(), nullable=False),
        sa.Column("class_id", sa.Uuid(), nullable=False),
        sa.Column("fee_type_id", sa.Uuid(), nullable=False),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("term1_amount", sa.Numeric(12, 2), nullable=False, server_default=sa.text("0")),
        sa.Column("term2_amount", sa.Numeric(12, 2), nullable=False, server_default=sa.text("0")),
        sa.Column("term3_amount", sa.Numeric(12, 2), nullable=False, server_default=sa.text("0")),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["academic_year_id"], ["academic_years.id"]),
        sa.ForeignKeyConstraint(["class_id"], ["classes.id"]),
        sa.ForeignKeyConstraint(["fee_type_id"], ["fee_types.id"]),
        sa.UniqueConstraint(
            "academic_year_id", "class_id", "fee_type_id",
            name="uq_fee_structures_year_class_type",
        ),
    )

    # ── fee_payments ──────────────────────────────────────────────────────
    op.create_table(
        "fee_payments",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("student_id", sa.Uuid(), nullable=False),
        sa.Column("academic_year_id", sa.Uuid(), nullable=False),
        sa.Column("payment_method_id", sa.Uuid(), nullable=True),
        sa.Column("payment_date", sa.Date(), nullable=False),
        sa.Column("receipt_number", sa.String(50), nullable=False),
        sa.Column("amount_paid", sa.Numeric(12, 2), nullable=False),
        sa.Column("reference_number", sa.String(100), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_by", sa.String(100), nullable=False,
                  server_default=sa.text("'system'")),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("receipt_number"),
        sa.ForeignKeyConstraint(["student_id"], ["students.id"]),
        sa.ForeignKeyConstraint(["academic_year_id"], ["academic_years.id"]),
        sa.ForeignKeyConstraint(["payment_method_id"], ["payment_methods.id"]),
    )
    op.create_index(
        "idx_fee_payments_student_date",
        "fee_payments",
        ["student_id", "payment_date"],
    )

    # ── payment_details ───────────────────────────────────────────────────
    op.create_table(
        "payment_details",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("payment_id", sa.Uuid(), nullable=False),
        sa.Column("fee_type_id", sa.Uuid(), nullable=False),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["payment_id"], ["fee_payments.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["fee_type_id"], ["fee_types.id"]),
    )


def downgrade() -> None:
    """
    WARNING: destructive. Drops every table created above.
    """
    op.drop_table("payment_details")
    op.drop_index("idx_fee_payments_student_date", table_name="fee_payments")
    op.drop_table("fee_payments")
    op.drop_table("fee_structures")
    op.drop_index("idx_students_class_id", table_name="students")
    op.drop_index("idx_students_created_at", table_name="students")
    op.drop_table("students")
    op.drop_index("uq_fee_types_name", table_name="fee_types")
    op.drop_table("fee_types")
    op.drop_index("uq_payment_methods_name", table_name="payment_methods")
    op.drop_table("payment_methods")
    op.drop_table("academic_years")
    op.drop_table("users")
    op.drop_index("idx_classes_level", table_name="classes")
    op.drop_index("uq_classes_name_level", table_name="classes")
    op.drop_table("classes")
