"""
Code book service - display vocabularies for payroll status, tax policy and user grade
"""
from enum import Enum
from typing import Callable, Dict, List, Tuple, Type

from sodam.core.enums import PayrollStatus, TaxPolicyType, UserGrade
from sodam.core.exceptions import EntityNotFoundError, InvalidOperationError
from sodam.instrumentation.performance import performance_log
from sodam.models.domain import CodeEntry

# kind -> (enum, label accessor)
CODE_BOOKS: Dict[str, Tuple[Type[Enum], Callable[[Enum], str]]] = {
    "payroll-statuses": (PayrollStatus, lambda member: member.description),
    "tax-policy-types": (TaxPolicyType, lambda member: member.description),
    "user-grades": (UserGrade, lambda member: member.role),
}


class CodeService:
    """Read-only access to the domain enumerations"""

    def list_payroll_statuses(self) -> List[CodeEntry]:
        return self._entries("payroll-statuses")

    def list_tax_policy_types(self) -> List[CodeEntry]:
        return self._entries("tax-policy-types")

    @performance_log
    def list_user_grades(self) -> List[CodeEntry]:
        return self._entries("user-grades")

    def describe(self, kind: str, code: str) -> CodeEntry:
        """
        Look up one member of a code book

        Args:
            kind: Code book name, e.g. "payroll-statuses"
            code: Member name, e.g. "PAID"

        Raises:
            EntityNotFoundError: Unknown code book or member
        """
        enum_cls, label_of = self._book(kind)
        try:
            member = enum_cls[code]
        except KeyError:
            raise EntityNotFoundError(
                f"Unknown code '{code}' in {kind}",
                details={"kind": kind, "code": code}
            ) from None
        return CodeEntry(code=member.name, label=label_of(member))

    def resolve_grade_for_purpose(self, purpose: str) -> UserGrade:
        """
        Grade a user asks for at sign-up

        Raises:
            InvalidOperationError: Purpose is blank or unknown
        """
        try:
            return UserGrade.from_purpose(purpose)
        except ValueError as e:
            raise InvalidOperationError(
                str(e),
                details={"purpose": purpose}
            ) from e

    def _book(self, kind: str) -> Tuple[Type[Enum], Callable[[Enum], str]]:
        try:
            return CODE_BOOKS[kind]
        except KeyError:
            raise EntityNotFoundError(
                f"Unknown code book: {kind}",
                details={"kind": kind, "available": sorted(CODE_BOOKS)}
            ) from None

    def _entries(self, kind: str) -> List[CodeEntry]:
        enum_cls, label_of = self._book(kind)
        return [CodeEntry(code=member.name, label=label_of(member)) for member in enum_cls]
