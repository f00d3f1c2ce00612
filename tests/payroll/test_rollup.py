from dataclasses import replace
from datetime import date

import pytest

from src.worker_management.worker_management.core.exceptions import DataError
from src.worker_management.worker_management.payroll.engine import calculate_employee_salary
from src.worker_management.worker_management.payroll.rollup import (
    calculate_department_report,
    calculate_system_report,
)
from tests.factories import DAY_SHIFT, GUARD, PORTER, absent, june, present


@pytest.fixture
def security_salaries():
    guard_records = [present(GUARD.id, june(d)) for d in range(1, 29)]
    guard_records += [absent(GUARD.id, june(29)), absent(GUARD.id, june(30))]
    porter_records = [present(PORTER.id, june(d)) for d in range(1, 31)]
    return [
        calculate_employee_salary(GUARD, DAY_SHIFT, guard_records, 2025, 6),
        calculate_employee_salary(PORTER, None, porter_records, 2025, 6),
    ]


def test_department_summary_sums_employees(security_salaries):
    report = calculate_department_report("dep_sec", "2025-06", security_salaries, department_name="Security")

    assert report.employee_count == 2
    assert report.summary.total_monthly_salary == 45000
    assert report.summary.total_calculated_salary == 43000
    assert report.summary.total_deduction == 2000
    assert report.summary.average_days_present == 29
    assert report.to_json()["summary"]["totalCalculatedSalary"] == 43000


def test_empty_department_reports_zeroes():
    report = calculate_department_report("dep_empty", "2025-06", [])

    assert report.employee_count == 0
    assert report.summary.average_days_present == 0
    assert report.summary.total_calculated_salary == 0


def test_department_rejects_salary_of_other_month(security_salaries):
    with pytest.raises(DataError):
        calculate_department_report("dep_sec", "2025-07", security_salaries)


def test_department_rejects_salary_of_other_department(security_salaries):
    with pytest.raises(DataError):
        calculate_department_report("dep_cln", "2025-06", security_salaries)


def test_bad_month_key_rejected():
    with pytest.raises(DataError):
        calculate_department_report("dep_sec", "June", [])


def test_system_total_is_sum_of_departments(security_salaries):
    security = calculate_department_report("dep_sec", "2025-06", security_salaries)
    empty = calculate_department_report("dep_cln", "2025-06", [])

    report = calculate_system_report("2025-06", [security, empty])

    assert report.department_count == 2
    assert report.system_total.total_employees == 2
    assert report.system_total.total_monthly_salary == 45000
    assert report.system_total.total_calculated_salary == 43000
    assert report.system_total.deduction_percentage == pytest.approx(4.444, abs=0.001)


def test_system_with_zero_salaries_has_zero_deduction_percentage(security_salaries):
    unpaid = [replace(s, monthly_salary=0, calculated_salary=0) for s in security_salaries]
    department = calculate_department_report("dep_sec", "2025-06", unpaid)

    report = calculate_system_report("2025-06", [department])

    assert report.system_total.deduction_percentage == 0
    assert report.to_json()["systemTotal"]["deductionPercentage"] == 0


def test_system_rejects_department_report_of_other_month():
    other = calculate_department_report("dep_sec", "2025-05", [])

    with pytest.raises(DataError):
        calculate_system_report("2025-06", [other])


def test_fractional_daily_rates_fold_consistently_across_three_departments():
    staff = [
        replace(PORTER, id="usr_a", department_id="dep_a", monthly_salary=31000.5),
        replace(PORTER, id="usr_b", department_id="dep_b", monthly_salary=17777),
        replace(PORTER, id="usr_c", department_id="dep_c", monthly_salary=9999),
        replace(PORTER, id="usr_d", department_id="dep_c", monthly_salary=12345.67),
    ]
    present_days = {"usr_a": 31, "usr_b": 23, "usr_c": 17, "usr_d": 29}
    salaries = [
        calculate_employee_salary(
            e, None, [present(e.id, date(2025, 7, d)) for d in range(1, present_days[e.id] + 1)], 2025, 7
        )
        for e in staff
    ]
    assert salaries[1].daily_rate == pytest.approx(17777 / 31)

    departments = [
        calculate_department_report(dep, "2025-07", [s for s in salaries if s.department_id == dep])
        for dep in ("dep_a", "dep_b", "dep_c")
    ]
    report = calculate_system_report("2025-07", departments)

    for department in departments:
        assert department.summary.total_calculated_salary == pytest.approx(
            sum(s.calculated_salary for s in department.salaries), abs=1e-9
        )
    assert report.system_total.total_calculated_salary == pytest.approx(
        sum(d.summary.total_calculated_salary for d in departments), abs=1e-9
    )
    assert report.system_total.total_monthly_salary == pytest.approx(31000.5 + 17777 + 9999 + 12345.67, abs=1e-9)
    assert report.system_total.total_employees == 4
    assert salaries[0].calculated_salary == pytest.approx(31000.5, abs=1e-9)
