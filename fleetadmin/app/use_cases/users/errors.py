from fleetadmin.libs.result import Error

USER_NOT_FOUND = Error("USER_NOT_FOUND", "User not found")
EMAIL_ALREADY_EXISTS = Error("EMAIL_ALREADY_EXISTS", "Email already exists")
INVALID_CREDENTIALS = Error("INVALID_CREDENTIALS", "Invalid email or password")
