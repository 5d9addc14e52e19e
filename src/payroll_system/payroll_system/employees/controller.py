from __future__ import annotations

import click

from ..container import Container
from ..core.constants import CONTRACT_CODE, FULL_TIME_CODE, INTERN_CODE, PART_TIME_CODE
from ..core.enums import EmployeeCategory
from ..core.exceptions import DomainError, ValidationError

MENU = "\n".join(
    [
        "",
        "=== Employee Payroll System (In-Memory) ===",
        "1. Add Employee",
        "2. Remove Employee",
        "3. Update Employee",
        "4. Search Employee",
        "5. List All Employees",
        "6. Generate Payslip",
        "0. Exit",
    ]
)

# field name -> (prompt label, value type)
FIELD_PROMPTS = {
    "monthly_salary": ("Monthly salary", float),
    "bonus": ("Bonus", float),
    "deduction": ("Deduction", float),
    "hours_worked": ("Hours worked", int),
    "hourly_rate": ("Hourly rate", float),
    "contract_amount": ("Contract amount", float),
    "stipend": ("Stipend", float),
}


def _read_text(label: str) -> str:
    return click.prompt(label, default="", show_default=False).strip()


def _yes_no(label: str) -> bool:
    """Any answer starting with "y" means yes, everything else means no."""
    return _read_text(f"{label} (y/n)").lower().startswith("y")


def _read_value(field_name: str):
    label, value_type = FIELD_PROMPTS[field_name]
    return click.prompt(label, type=value_type)


def run(container: Container) -> None:
    """Interactive menu loop; returns when the user picks Exit."""

    employees = container.employee_service
    payslips = container.payslip_service

    def add_employee() -> None:
        click.echo(
            f"Select type: {FULL_TIME_CODE}.Full-time {PART_TIME_CODE}.Part-time "
            f"{CONTRACT_CODE}.Contract {INTERN_CODE}.Intern"
        )
        code = click.prompt("Type", type=int)
        name = _read_text("Name")
        email = _read_text("Email")

        try:
            category = EmployeeCategory.from_code(code)
        except ValidationError:
            click.echo("Invalid type.")
            return

        details = {}
        if category is EmployeeCategory.FULL_TIME:
            details["monthly_salary"] = _read_value("monthly_salary")
            if _yes_no("Add bonus?"):
                details["bonus"] = _read_value("bonus")
            if _yes_no("Add deduction?"):
                details["deduction"] = _read_value("deduction")
        else:
            for field_name in container.employee_factory.detail_fields(category):
                details[field_name] = _read_value(field_name)

        employee = employees.hire(category, name=name, email=email, **details)
        click.echo(f"Added: {payslips.summary(employee)}")

    def remove_employee() -> None:
        employee_id = click.prompt("Enter ID to remove", type=int)
        if employees.dismiss(employee_id):
            click.echo(f"Removed employee with ID {employee_id}")
        else:
            click.echo(f"No employee found with ID {employee_id}")

    def update_employee() -> None:
        employee_id = click.prompt("Enter employee ID to update", type=int)
        employee = employees.find(employee_id)
        if not employee:
            click.echo(f"No employee with ID {employee_id}")
            return

        click.echo(f"Found: {payslips.summary(employee)}")
        changes = {}
        for field_name in employees.updatable_fields(employee):
            if field_name in FIELD_PROMPTS:
                label = FIELD_PROMPTS[field_name][0]
                if _yes_no(f"Change {label.lower()}?"):
                    changes[field_name] = _read_value(field_name)
            elif _yes_no(f"Change {field_name}?"):
                changes[field_name] = _read_text(f"New {field_name}")

        employees.update(employee_id, **changes)
        click.echo(f"Updated: {payslips.summary(employee)}")

    def search_employees() -> None:
        click.echo("Search by: 1.ID  2.Name")
        choice = click.prompt("Choice", type=int)
        if choice == 1:
            employee = employees.find(click.prompt("ID", type=int))
            click.echo(payslips.summary(employee) if employee else "Not found")
        elif choice == 2:
            results = employees.search(_read_text("Name part"))
            if not results:
                click.echo("No matches.")
            for employee in results:
                click.echo(payslips.summary(employee))
        else:
            click.echo("Invalid choice.")

    def list_employees() -> None:
        all_employees = employees.list_all()
        if not all_employees:
            click.echo("No employees registered.")
            return
        click.echo("---- Employee List ----")
        for employee in all_employees:
            click.echo(payslips.summary(employee))

    def show_payslip() -> None:
        employee_id = click.prompt("Enter employee ID for payslip", type=int)
        text = payslips.generate_payslip_text(employee_id)
        click.echo(text if text is not None else "Employee not found.")

    actions = {
        1: add_employee,
        2: remove_employee,
        3: update_employee,
        4: search_employees,
        5: list_employees,
        6: show_payslip,
    }

    while True:
        click.echo(MENU)
        choice = click.prompt("Choose an option", type=int)
        if choice == 0:
            click.echo("Exiting... Goodbye!")
            return

        action = actions.get(choice)
        if not action:
            click.echo("Invalid option. Try again.")
            continue

        try:
            action()
        except DomainError as e:
            click.echo(f"Error: {e}")
