from fleetadmin.libs.result import Error

DRIVER_NOT_FOUND = Error("DRIVER_NOT_FOUND", "Driver not found")
COMPANY_NOT_FOUND = Error("COMPANY_NOT_FOUND", "Company not found")
COMPANY_SUSPENDED = Error("COMPANY_SUSPENDED", "Company is suspended")
DUPLICATE_DRIVER_PHONE = Error(
    "DUPLICATE_DRIVER_PHONE", "Driver with this phone already exists in this company"
)


def driver_limit_reached(limit: int) -> Error:
    return Error(
        "DRIVER_LIMIT_REACHED", f"Company has reached its limit of {limit} drivers"
    )
