"""Example: use the service layer directly (no console menu).

Goal: the console controller is a thin layer, the business rules live in services.
"""

from src.payroll_system.payroll_system.container import build_container
from src.payroll_system.payroll_system.employees.bootstrap import seed_demo_employees


def main():
    container = build_container()
    seed_demo_employees(container.employee_service)

    for employee in container.employee_service.search("ri"):
        print(container.payslip_service.summary(employee))
    print(container.payslip_service.generate_payslip_text(2))
    print(f"Total payroll: {container.payslip_service.total_payroll():.2f}")


if __name__ == "__main__":
    main()
