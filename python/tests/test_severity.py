import pytest
import gcplog
from gcplog import SEVERITIES, Severity, is_valid_severity


def test_nine_canonical_severities() -> None:
    assert SEVERITIES == (
        "DEFAULT", "INFO", "NOTICE", "WARNING", "ERROR",
        "CRITICAL", "ALERT", "EMERGENCY", "DEBUG",
    )


def test_alias_constants_hold_canonical_value() -> None:
    assert gcplog.WARN == gcplog.WARNING == "WARNING"
    assert gcplog.ERR == gcplog.ERROR == "ERROR"
    assert gcplog.CRIT == gcplog.CRITICAL == "CRITICAL"


def test_enum_aliases_are_same_member() -> None:
    assert Severity.WARN is Severity.WARNING
    assert Severity.ERR is Severity.ERROR
    assert Severity.CRIT is Severity.CRITICAL
    assert len(list(Severity)) == 9
    assert str(Severity.WARN) == "WARNING"


@pytest.mark.parametrize("candidate", ["DEFAULT", "info", "Notice", "warning", "EMERGENCY", Severity.ALERT])
def test_is_valid_severity_accepts_any_case(candidate) -> None:
    assert is_valid_severity(candidate)


@pytest.mark.parametrize("candidate", ["warn", "ERR", "crit", "", "FATAL", " INFO", None, 3])
def test_is_valid_severity_rejects(candidate) -> None:
    assert not is_valid_severity(candidate)
