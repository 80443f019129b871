import pytest
from structlog.testing import capture_logs

from sodam.config import load_settings
from sodam.core.enums import UserGrade
from sodam.core.exceptions import EntityNotFoundError, InvalidOperationError
from sodam.services.code_service import CodeService
from sodam.services.health_service import HealthService
from sodam.services.store_service import StorePolicyService


def test_code_service_lists_members_with_labels():
    service = CodeService()

    statuses = service.list_payroll_statuses()
    assert [entry.code for entry in statuses] == ["DRAFT", "CONFIRMED", "PAID", "CANCELLED"]
    assert statuses[2].label == "지급완료"
    assert [entry.label for entry in service.list_tax_policy_types()] == ["소득세 3.3%", "4대보험"]
    assert {entry.code: entry.label for entry in service.list_user_grades()}["BOSSES"] == "ROLE_BOSS"


def test_describe_known_code():
    entry = CodeService().describe("payroll-statuses", "CANCELLED")

    assert entry.code == "CANCELLED"
    assert entry.label == "취소됨"


@pytest.mark.parametrize("kind, code", [
    ("payroll-statuses", "ARCHIVED"),
    ("salary-bands", "A"),
])
def test_describe_unknown_raises_not_found(kind, code):
    with pytest.raises(EntityNotFoundError) as exc_info:
        CodeService().describe(kind, code)

    assert exc_info.value.details["kind"] == kind


def test_resolve_grade_for_purpose():
    service = CodeService()

    assert service.resolve_grade_for_purpose("boss") is UserGrade.MASTER
    with pytest.raises(InvalidOperationError) as exc_info:
        service.resolve_grade_for_purpose("visitor")
    assert exc_info.value.details == {"purpose": "visitor"}


def test_store_service_uses_configured_default(isolated_config):
    settings = load_settings(app={"store": {"default_radius": 250}})
    service = StorePolicyService(settings)

    assert service.default_radius() == 250
    assert service.resolve_radius() == 250
    assert service.resolve_radius(None) == 250
    assert service.resolve_radius(80) == 80


@pytest.mark.parametrize("radius", [0, -5])
def test_store_service_rejects_non_positive_radius(settings, radius):
    with pytest.raises(InvalidOperationError):
        StorePolicyService(settings).resolve_radius(radius)


def test_health_check_ready(settings, fake_redis_factory):
    service = HealthService(settings, fake_redis_factory(), fake_redis_factory())

    assert service.check() == {
        "status": "ready",
        "version": settings.app_version,
        "redis_available": True,
        "cache_available": True,
    }


def test_health_check_degrades_when_cache_is_down(settings, fake_redis_factory):
    service = HealthService(settings, fake_redis_factory(), fake_redis_factory(available=False))

    with capture_logs() as logs:
        result = service.check()

    assert result["status"] == "not_ready"
    assert result["cache_available"] is False
    assert result["redis_available"] is True
    assert logs[0]["event"] == "Redis ping failed"
    assert logs[0]["database"] == "cache"
    assert service.is_cache_available() is False


def test_primary_availability_is_pinged_separately(settings, fake_redis_factory):
    service = HealthService(settings, fake_redis_factory(available=False), fake_redis_factory())

    with capture_logs() as logs:
        assert service.is_primary_available() is False
        assert service.is_cache_available() is True

    assert [entry["database"] for entry in logs] == ["primary"]


def test_container_instruments_services(container):
    with capture_logs() as logs:
        container.code_service.list_tax_policy_types()

    events = [entry["event"] for entry in logs]
    assert events == ["service call started", "service call completed", "service call elapsed"]
    assert logs[0]["class_name"] == "CodeService"
