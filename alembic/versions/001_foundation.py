"""
============================================================
TARJETA CRC (Class / Responsibilities / Collaborators)
============================================================
Class: 001_foundation (Alembic Migration)

Responsibilities:
  - Crear el esquema completo desde cero (migración fundacional).
  - Definir tablas, constraints e índices del dominio de RR.HH.

Collaborators:
  - PostgreSQL 14+
  - Alembic (framework de migraciones)
  - infrastructure/repositories/postgres (usa este esquema como contrato)

Policy:
  - Esta es una migración BASELINE. Downgrade NO soportado.
  - Convención de nombres (constraints / indexes):
      pk_<tabla>                         - Primary keys
      uq_<tabla>_<col>                   - Unique constraints
      ix_<tabla>_<col>                   - Indexes
      fk_<tabla>_<col>__<ref_tabla>      - Foreign keys
      ck_<tabla>_<regla>                 - Check constraints
============================================================
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "001_foundation"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
    ]


def upgrade() -> None:
    """
    Crea el esquema fundacional.

    Orden por dependencias:
      1) Accounts (identidad + credencial)
      2) Job grades (catálogo)
      3) Employments (1:1 con account)
      4) Leave requests (workflow)
    """

    # =========================================================
    # 1) ACCOUNTS
    # =========================================================
    op.create_table(
        "accounts",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        # email se compara tal cual (case-sensitive).
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("password_hash", sa.Text, nullable=False),
        # 0=SuperAdmin, 1=HR, 2=Employee (viaja en el claim "role").
        sa.Column(
            "role", sa.SmallInteger, nullable=False, server_default=sa.text("2")
        ),
        sa.Column("phone_number", sa.String(32), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_accounts"),
        sa.UniqueConstraint("email", name="uq_accounts_email"),
        sa.CheckConstraint("role IN (0, 1, 2)", name="ck_accounts_role"),
    )
    op.create_index("ix_accounts_role", "accounts", ["role"])

    # =========================================================
    # 2) JOB GRADES
    # =========================================================
    op.create_table(
        "job_grades",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("code", sa.String(20), nullable=False),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("min_salary", sa.Numeric(12, 2), nullable=True),
        sa.Column("max_salary", sa.Numeric(12, 2), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.PrimaryKeyConstraint("id", name="pk_job_grades"),
        sa.UniqueConstraint("code", name="uq_job_grades_code"),
    )

    # =========================================================
    # 3) EMPLOYMENTS
    # =========================================================
    op.create_table(
        "employments",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("account_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("job_grade_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("position_title", sa.String(200), nullable=True),
        sa.Column("salary", sa.Numeric(12, 2), nullable=True),
        sa.Column("hire_date", sa.Date, nullable=True),
        sa.Column("termination_date", sa.Date, nullable=True),
        sa.Column(
            "status",
            sa.String(20),
            nullable=False,
            server_default=sa.text("'active'"),
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_employments"),
        sa.UniqueConstraint("account_id", name="uq_employments_account_id"),
        sa.ForeignKeyConstraint(
            ["account_id"],
            ["accounts.id"],
            name="fk_employments_account_id__accounts",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["job_grade_id"],
            ["job_grades.id"],
            name="fk_employments_job_grade_id__job_grades",
            ondelete="SET NULL",
        ),
        sa.CheckConstraint(
            "status IN ('active', 'on_leave', 'terminated')",
            name="ck_employments_status",
        ),
    )
    op.create_index("ix_employments_job_grade_id", "employments", ["job_grade_id"])
    op.create_index("ix_employments_status", "employments", ["status"])

    # =========================================================
    # 4) LEAVE REQUESTS
    # =========================================================
    op.create_table(
        "leave_requests",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("account_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("leave_type", sa.String(20), nullable=False),
        sa.Column("start_date", sa.Date, nullable=False),
        sa.Column("end_date", sa.Date, nullable=False),
        sa.Column("reason", sa.Text, nullable=True),
        sa.Column(
            "status",
            sa.String(20),
            nullable=False,
            server_default=sa.text("'pending'"),
        ),
        sa.Column(
            "requested_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.Column("approver_id", postgresql.UUID(as_uuid=True), nullable=True),
        # approved_at se usa para ambos resultados (aprobada / rechazada).
        sa.Column("approved_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.PrimaryKeyConstraint("id", name="pk_leave_requests"),
        sa.ForeignKeyConstraint(
            ["account_id"],
            ["accounts.id"],
            name="fk_leave_requests_account_id__accounts",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["approver_id"],
            ["accounts.id"],
            name="fk_leave_requests_approver_id__accounts",
            ondelete="SET NULL",
        ),
        sa.CheckConstraint(
            "status IN ('pending', 'approved', 'rejected')",
            name="ck_leave_requests_status",
        ),
        sa.CheckConstraint(
            "end_date >= start_date", name="ck_leave_requests_date_range"
        ),
    )
    op.create_index("ix_leave_requests_account_id", "leave_requests", ["account_id"])
    op.create_index("ix_leave_requests_status", "leave_requests", ["status"])
    op.create_index(
        "ix_leave_requests_requested_at", "leave_requests", ["requested_at"]
    )


def downgrade() -> None:
    """Downgrade NO soportado para la migración fundacional."""
    raise NotImplementedError(
        "Baseline: downgrade no soportado por política. "
        "Para resetear la base de datos, recrearla y correr `alembic upgrade head`."
    )
