"""
============================================================
TARJETA CRC (Class / Responsibilities / Collaborators)
============================================================
Class: 002_job_grade_catalog (Alembic Migration)

Responsibilities:
  - Cargar el catálogo base de escalafones (datos de referencia, no demo).
  - El alta de cuentas resuelve job_grade_code contra esta tabla.

Policy:
  - Idempotente por code (ON CONFLICT DO NOTHING).
  - Downgrade borra solo los códigos insertados acá.
============================================================
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "002_job_grade_catalog"
down_revision: Union[str, None] = "001_foundation"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# (code, name, description, min_salary, max_salary)
_CATALOG = [
    ("P1", "Associate Engineer", "Entry-level professional contributor.", 50000, 75000),
    ("P2", "Engineer", "Intermediate professional contributor.", 65000, 90000),
    ("P3", "Senior Engineer", "Experienced professional contributor.", 80000, 120000),
    ("M1", "Manager", "First-level manager.", 90000, 140000),
    ("M2", "Senior Manager", "Experienced manager.", 110000, 170000),
    ("D1", "Director", "Senior leader.", 150000, 250000),
]


def upgrade() -> None:
    insert = sa.text(
        """
        INSERT INTO job_grades (id, code, name, description, min_salary, max_salary)
        VALUES (gen_random_uuid(), :code, :name, :description, :min_salary, :max_salary)
        ON CONFLICT (code) DO NOTHING
        """
    )
    for code, name, description, min_salary, max_salary in _CATALOG:
        op.get_bind().execute(
            insert,
            {
                "code": code,
                "name": name,
                "description": description,
                "min_salary": min_salary,
                "max_salary": max_salary,
            },
        )


def downgrade() -> None:
    op.get_bind().execute(
        sa.text("DELETE FROM job_grades WHERE code = ANY(:codes)"),
        {"codes": [row[0] for row in _CATALOG]},
    )
