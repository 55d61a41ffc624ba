"""
===============================================================================
USE CASE: Create Account With Employment
===============================================================================

Name:
    Create Account With Employment Use Case

Business Goal:
    Dar de alta una cuenta y su registro laboral como UNA unidad atómica:
    o existen ambos, o no existe ninguno.

Why (Context / Intención):
    - Una cuenta sin employment (o al revés) deja al sistema en un estado que
      ningún otro flujo sabe reparar.
    - El alta está restringida por rol (provisioning controlado): SuperAdmin
      crea HR o Employee; HR crea solo Employee.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    CreateAccountWithEmploymentUseCase

Responsibilities:
    - Validar autorización del actor (antes que nada).
    - Normalizar / validar inputs y resolver el job grade por código.
    - Dentro de UNA transacción: unicidad de email, hash de password,
      insert de account, insert de employment.
    - Forzar rollback ante cualquier falla de negocio o de storage.
    - Devolver AccountResult tipado (account sin password_hash).

Collaborators:
    - UnitOfWork.begin() -> ProvisioningTransaction(accounts, employments)
    - JobGradeRepository.get_by_code
    - PasswordHasher.hash
    - Clock.now (hire_date por defecto)
    - domain.account_policy.can_create_account

-------------------------------------------------------------------------------
INPUTS / OUTPUTS (Contrato del caso de uso)
-------------------------------------------------------------------------------
Inputs:
    - CreateAccountInput

Outputs:
    - AccountResult(account, employment, error)

Error Mapping:
    - FORBIDDEN: actor sin permiso para el rol pedido
    - VALIDATION_ERROR: nombre/email vacío, job grade inexistente, salario < 0
    - EMAIL_EXISTS: email ya registrado
    - PASSWORD_HASHING_FAILED: el hasher falló
    - ACCOUNT_CREATION_FAILED / EMPLOYMENT_CREATION_FAILED: insert fallido
    - INTERNAL_ERROR: lookup/commit fallido, password por defecto no configurado
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID, uuid4

from ....crosscutting.exceptions import DatabaseError
from ....crosscutting.logger import logger
from ....domain.account_policy import can_create_account
from ....domain.entities import Account, AccountRole, Employment, EmploymentStatus
from ....domain.repositories import (
    JobGradeRepository,
    ProvisioningTransaction,
    UnitOfWork,
)
from ....domain.services import Clock, PasswordHasher
from ....identity.errors import PasswordHashingError
from .account_results import AccountError, AccountErrorCode, AccountResult


@dataclass(frozen=True)
class CreateAccountInput:
    """
    DTO de entrada del caso de uso.

    Notas:
      - actor_role: rol del principal autenticado que ejecuta el alta.
      - password: opcional; si falta se usa el password por defecto configurado.
      - hire_date: opcional; por defecto la fecha actual del reloj inyectado.
    """

    actor_role: AccountRole
    first_name: str
    last_name: str
    email: str
    role: AccountRole = AccountRole.EMPLOYEE
    phone_number: str | None = None
    password: str | None = None
    job_grade_code: str | None = None
    position_title: str | None = None
    salary: Decimal | None = None
    hire_date: date | None = None


class _ProvisioningAborted(Exception):
    """Sale del bloque transaccional para forzar rollback con un resultado."""

    def __init__(self, result: AccountResult) -> None:
        super().__init__(result.error.message if result.error else "aborted")
        self.result = result


class CreateAccountWithEmploymentUseCase:
    """
    Use Case (Application Service / Command):
        Alta atómica de Account + Employment.
    """

    def __init__(
        self,
        *,
        unit_of_work: UnitOfWork,
        job_grades: JobGradeRepository,
        password_hasher: PasswordHasher,
        clock: Clock,
        default_password: str = "",
    ) -> None:
        self._uow = unit_of_work
        self._job_grades = job_grades
        self._hasher = password_hasher
        self._clock = clock
        self._default_password = default_password

    def execute(self, input_data: CreateAccountInput) -> AccountResult:
        # ---------------------------------------------------------------------
        # 1) Autorización: se evalúa antes de tocar cualquier storage.
        # ---------------------------------------------------------------------
        if not can_create_account(input_data.actor_role, input_data.role):
            return self._error(
                AccountErrorCode.FORBIDDEN,
                "Not allowed to create an account with this role.",
            )

        # ---------------------------------------------------------------------
        # 2) Normalizar / validar inputs.
        # ---------------------------------------------------------------------
        first_name = (input_data.first_name or "").strip()
        last_name = (input_data.last_name or "").strip()
        email = (input_data.email or "").strip()
        if not first_name or not last_name:
            return self._error(
                AccountErrorCode.VALIDATION_ERROR, "First and last name are required."
            )
        if not email:
            return self._error(AccountErrorCode.VALIDATION_ERROR, "Email is required.")
        if input_data.salary is not None and input_data.salary < 0:
            return self._error(
                AccountErrorCode.VALIDATION_ERROR, "Salary must be non-negative."
            )

        # ---------------------------------------------------------------------
        # 3) Resolver job grade (catálogo, fuera de la transacción).
        # ---------------------------------------------------------------------
        job_grade_id: UUID | None = None
        if input_data.job_grade_code:
            try:
                grade = self._job_grades.get_by_code(input_data.job_grade_code.strip())
            except DatabaseError as exc:
                logger.error(
                    "CreateAccount: job grade lookup failed",
                    extra={"error": exc.message},
                )
                return self._error(
                    AccountErrorCode.INTERNAL_ERROR, "Failed to look up job grade."
                )
            if grade is None:
                return self._error(
                    AccountErrorCode.VALIDATION_ERROR, "Unknown job grade code."
                )
            job_grade_id = grade.id

        # ---------------------------------------------------------------------
        # 4) Password efectivo (provisto o por defecto).
        # ---------------------------------------------------------------------
        password = input_data.password or self._default_password
        if not password:
            logger.error("CreateAccount: default password is not configured")
            return self._error(
                AccountErrorCode.INTERNAL_ERROR, "Default password is not configured."
            )

        account = Account(
            id=uuid4(),
            first_name=first_name,
            last_name=last_name,
            email=email,
            password_hash="",
            role=input_data.role,
            phone_number=(input_data.phone_number or "").strip() or None,
        )
        employment = Employment(
            id=uuid4(),
            account_id=account.id,
            job_grade_id=job_grade_id,
            position_title=(input_data.position_title or "").strip() or None,
            salary=input_data.salary,
            hire_date=input_data.hire_date or self._clock.now().date(),
            status=EmploymentStatus.ACTIVE,
        )

        # ---------------------------------------------------------------------
        # 5) Unidad atómica. Cualquier error de negocio sale con
        #    _ProvisioningAborted => rollback.
        # ---------------------------------------------------------------------
        try:
            with self._uow.begin() as tx:
                result = self._provision(tx, account, employment, password)
                if result.error is not None:
                    raise _ProvisioningAborted(result)
        except _ProvisioningAborted as aborted:
            return aborted.result
        except DatabaseError as exc:
            logger.error(
                "CreateAccount: transaction commit failed",
                extra={"error": exc.message, "email": email},
            )
            return self._error(
                AccountErrorCode.INTERNAL_ERROR, "Failed to commit account creation."
            )

        logger.info(
            "Cuenta creada",
            extra={
                "account_id": str(result.account.id) if result.account else None,
                "role": int(input_data.role),
            },
        )
        return result

    def _provision(
        self,
        tx: ProvisioningTransaction,
        account: Account,
        employment: Employment,
        password: str,
    ) -> AccountResult:
        # a) Unicidad de email.
        try:
            existing = tx.accounts.get_by_email(account.email)
        except DatabaseError as exc:
            logger.error(
                "CreateAccount: email lookup failed", extra={"error": exc.message}
            )
            return self._error(
                AccountErrorCode.INTERNAL_ERROR, "Failed to check email uniqueness."
            )
        if existing is not None:
            return self._error(
                AccountErrorCode.EMAIL_EXISTS, "An account with this email already exists."
            )

        # b) Hash.
        try:
            password_hash = self._hasher.hash(password)
        except PasswordHashingError as exc:
            logger.error(
                "CreateAccount: password hashing failed", extra={"error": exc.message}
            )
            return self._error(
                AccountErrorCode.PASSWORD_HASHING_FAILED, "Failed to hash password."
            )

        # c) Account.
        account.password_hash = password_hash
        try:
            created_account = tx.accounts.create(account)
        except DatabaseError as exc:
            logger.error(
                "CreateAccount: account insert failed", extra={"error": exc.message}
            )
            return self._error(
                AccountErrorCode.ACCOUNT_CREATION_FAILED, "Failed to create account."
            )

        # d) Employment ligado a la cuenta recién creada.
        employment.account_id = created_account.id
        try:
            created_employment = tx.employments.create(employment)
        except DatabaseError as exc:
            logger.error(
                "CreateAccount: employment insert failed", extra={"error": exc.message}
            )
            return self._error(
                AccountErrorCode.EMPLOYMENT_CREATION_FAILED,
                "Failed to create employment record.",
            )

        return AccountResult(
            account=created_account.public(), employment=created_employment
        )

    @staticmethod
    def _error(code: AccountErrorCode, message: str) -> AccountResult:
        return AccountResult(error=AccountError(code=code, message=message))
