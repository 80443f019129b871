from enum import Enum

import pytest

from sodam.core.enums import PayrollStatus, TaxPolicyType, UserGrade, ensure_complete


def test_payroll_status_labels_in_declaration_order():
    assert [status.description for status in PayrollStatus.members()] == [
        "작성중", "확정", "지급완료", "취소됨"
    ]
    assert [status.name for status in PayrollStatus] == ["DRAFT", "CONFIRMED", "PAID", "CANCELLED"]


def test_tax_policy_type_has_two_members():
    assert len(TaxPolicyType.members()) == 2
    assert TaxPolicyType.INCOME_TAX_3_3.description == "소득세 3.3%"
    assert TaxPolicyType.FOUR_INSURANCES.description == "4대보험"


def test_user_grade_roles():
    assert UserGrade.BOSSES.role == "ROLE_BOSS"
    assert {grade.name: grade.role for grade in UserGrade} == {
        "Personal": "ROLE_USER",
        "EMPLOYEE": "ROLE_EMPLOYEE",
        "BOSSES": "ROLE_BOSS",
        "MASTER": "ROLE_MASTER",
        "MANAGER": "ROLE_MANAGER",
    }


def test_members_are_string_valued():
    assert PayrollStatus("PAID") is PayrollStatus.PAID
    assert UserGrade.MASTER == "MASTER"


def test_unknown_value_fails_fast():
    with pytest.raises(ValueError):
        PayrollStatus("ARCHIVED")


@pytest.mark.parametrize("purpose, grade", [
    ("personal", UserGrade.Personal),
    ("Employee", UserGrade.EMPLOYEE),
    ("  BOSS ", UserGrade.MASTER),
])
def test_from_purpose(purpose, grade):
    assert UserGrade.from_purpose(purpose) is grade


@pytest.mark.parametrize("purpose", ["", "   ", None, "manager"])
def test_from_purpose_rejects_blank_or_unknown(purpose):
    with pytest.raises(ValueError):
        UserGrade.from_purpose(purpose)


def test_ensure_complete_reports_missing_members():
    class Color(str, Enum):
        RED = "RED"
        BLUE = "BLUE"

    ensure_complete(Color, {Color.RED: "빨강", Color.BLUE: "파랑"})

    with pytest.raises(RuntimeError, match="BLUE"):
        ensure_complete(Color, {Color.RED: "빨강"})
