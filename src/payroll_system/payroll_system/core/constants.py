"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

INITIAL_EMPLOYEE_ID = 0

# Category codes used by the console menu.
FULL_TIME_CODE = 1
PART_TIME_CODE = 2
CONTRACT_CODE = 3
INTERN_CODE = 4

PAYSLIP_HEADER = "----- PAYSLIP -----"
PAYSLIP_FOOTER = "-------------------"
