"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100

DEPARTMENT = "Department"
EMPLOYEE = "Employee"

# MySQL server error codes translated into domain errors.
ER_DUP_ENTRY = 1062
ER_NO_REFERENCED_ROW_2 = 1452
