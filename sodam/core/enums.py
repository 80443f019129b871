"""
Domain enumerations with their display labels and role names
"""
from enum import Enum
from typing import Dict, List


class PayrollStatus(str, Enum):
    """Payroll record lifecycle stage"""
    DRAFT = "DRAFT"
    CONFIRMED = "CONFIRMED"
    PAID = "PAID"
    CANCELLED = "CANCELLED"

    @property
    def description(self) -> str:
        return _PAYROLL_STATUS_LABELS[self]

    @classmethod
    def members(cls) -> List["PayrollStatus"]:
        return list(cls)


class TaxPolicyType(str, Enum):
    """Withholding strategy applied to an employee's pay"""
    INCOME_TAX_3_3 = "INCOME_TAX_3_3"
    FOUR_INSURANCES = "FOUR_INSURANCES"

    @property
    def description(self) -> str:
        return _TAX_POLICY_LABELS[self]

    @classmethod
    def members(cls) -> List["TaxPolicyType"]:
        return list(cls)


class UserGrade(str, Enum):
    """User grade mapped to an authorization role"""
    Personal = "Personal"
    EMPLOYEE = "EMPLOYEE"
    BOSSES = "BOSSES"
    MASTER = "MASTER"
    MANAGER = "MANAGER"

    @property
    def role(self) -> str:
        return _USER_GRADE_ROLES[self]

    @classmethod
    def members(cls) -> List["UserGrade"]:
        return list(cls)

    @classmethod
    def from_purpose(cls, purpose: str) -> "UserGrade":
        """
        Grade requested by a sign-up purpose

        Args:
            purpose: personal | employee | boss (case-insensitive)

        Raises:
            ValueError: purpose is blank or unknown
        """
        if purpose is None or not purpose.strip():
            raise ValueError("purpose must not be blank")
        try:
            return _PURPOSE_GRADES[purpose.strip().lower()]
        except KeyError:
            raise ValueError(f"unknown purpose: {purpose}") from None


_PAYROLL_STATUS_LABELS: Dict[PayrollStatus, str] = {
    PayrollStatus.DRAFT: "작성중",
    PayrollStatus.CONFIRMED: "확정",
    PayrollStatus.PAID: "지급완료",
    PayrollStatus.CANCELLED: "취소됨",
}

_TAX_POLICY_LABELS: Dict[TaxPolicyType, str] = {
    TaxPolicyType.INCOME_TAX_3_3: "소득세 3.3%",
    TaxPolicyType.FOUR_INSURANCES: "4대보험",
}

_USER_GRADE_ROLES: Dict[UserGrade, str] = {
    UserGrade.Personal: "ROLE_USER",
    UserGrade.EMPLOYEE: "ROLE_EMPLOYEE",
    UserGrade.BOSSES: "ROLE_BOSS",
    UserGrade.MASTER: "ROLE_MASTER",
    UserGrade.MANAGER: "ROLE_MANAGER",
}

_PURPOSE_GRADES: Dict[str, UserGrade] = {
    "personal": UserGrade.Personal,
    "employee": UserGrade.EMPLOYEE,
    "boss": UserGrade.MASTER,
}


def ensure_complete(enum_cls: type, table: dict) -> None:
    """Fail at import time when an enum member has no metadata entry"""
    missing = [member.name for member in enum_cls if member not in table]
    if missing:
        raise RuntimeError(
            f"{enum_cls.__name__} metadata is missing entries for: {', '.join(missing)}"
        )


ensure_complete(PayrollStatus, _PAYROLL_STATUS_LABELS)
ensure_complete(TaxPolicyType, _TAX_POLICY_LABELS)
ensure_complete(UserGrade, _USER_GRADE_ROLES)
