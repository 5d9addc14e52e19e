import pytest

from src.payroll_system.payroll_system.employees.model import ContractEmployee, FullTimeEmployee, Intern, PartTimeEmployee
from src.payroll_system.payroll_system.payroll.calculator.standard_calculator import StandardSalaryCalculator


def test_full_time_adds_bonus_and_subtracts_deduction():
    e = FullTimeEmployee(employee_id=1, name="Vikas", email="v@x", monthly_salary=70000.0, bonus=2000.0)

    calc = StandardSalaryCalculator()
    assert calc.calculate_salary(e) == 72000.0
    assert calc.salary_breakdown(e) == "Monthly: 70000.00 | Bonus: 2000.00 | Deduction: 0.00 | Net: 72000.00"


def test_full_time_negative_net_is_not_clamped():
    e = FullTimeEmployee(employee_id=1, name="A", email="a@x", monthly_salary=100.0, bonus=0.0, deduction=250.0)

    assert StandardSalaryCalculator().calculate_salary(e) == -150.0


def test_part_time_multiplies_hours_by_rate():
    e = PartTimeEmployee(employee_id=2, name="Manish", email="m@x", hours_worked=40, hourly_rate=100.0)

    calc = StandardSalaryCalculator()
    assert calc.calculate_salary(e) == 4000.0
    assert calc.salary_breakdown(e) == "Hours: 40 | Rate: 100.00 | Net: 4000.00"


def test_salary_keeps_full_precision():
    e = PartTimeEmployee(employee_id=2, name="M", email="m@x", hours_worked=3, hourly_rate=0.333)

    assert StandardSalaryCalculator().calculate_salary(e) == pytest.approx(0.999)


@pytest.mark.parametrize(
    "employee, expected",
    [
        (ContractEmployee(employee_id=3, name="Raj", email="r@x", contract_amount=50000.0), "Base salary: 50000.00"),
        (Intern(employee_id=4, name="Ria", email="ria@x", stipend=5000.0), "Base salary: 5000.00"),
    ],
)
def test_contract_and_intern_use_base_breakdown(employee, expected):
    assert StandardSalaryCalculator().salary_breakdown(employee) == expected


def test_negative_inputs_flow_through():
    e = Intern(employee_id=4, name="Ria", email="ria@x", stipend=-10.0)

    assert StandardSalaryCalculator().calculate_salary(e) == -10.0
